"""
API routers for the catalog service.
"""
