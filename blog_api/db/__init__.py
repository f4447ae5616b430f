"""
Database toolkit exposing ORM mappings and repositories.
"""

from .models import Base, Comment, Post, User
from .repositories import BaseRepository, CommentRepository, PostRepository, UserRepository

__all__ = [
    "Base",
    "BaseRepository",
    "Comment",
    "CommentRepository",
    "Post",
    "PostRepository",
    "User",
    "UserRepository",
]
