"""
Repository classes for database access.

This module provides one repository per table:
- UserRepository: usuarios
- PostRepository: publicaciones
- CommentRepository: comentarios
"""

from .base import BaseRepository
from .comment import CommentRepository
from .post import PostRepository
from .user import UserRepository

__all__ = ["BaseRepository", "CommentRepository", "PostRepository", "UserRepository"]
