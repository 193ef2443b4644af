"""
HighFive Enterprises website
Site server (FastAPI) and client state layer
"""

__version__ = "1.0.0"
