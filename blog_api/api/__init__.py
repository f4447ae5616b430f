"""
FastAPI REST API exposing the usuarios, publicaciones and comentarios tables.
"""

from .main import app, create_app
from .routes import admin_router, comments_router, posts_router, users_router

__all__ = [
    "admin_router",
    "app",
    "comments_router",
    "create_app",
    "posts_router",
    "users_router",
]
