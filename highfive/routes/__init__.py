"""
API Routers
"""
