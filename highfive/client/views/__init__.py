"""
Client Views
Admin list-and-edit screens and public read views
"""
