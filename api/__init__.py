"""
HTTP layer for the Chefs Table application.

FastAPI routers per entity plus the authentication endpoints.
"""

from .app import create_app

__all__ = ['create_app']
