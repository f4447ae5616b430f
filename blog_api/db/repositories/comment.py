"""
Comment repository for data access operations on the comentarios table.
"""

from __future__ import annotations

from sqlalchemy import delete, select, update

from ..models import Comment
from .base import BaseRepository, Row

COMMENT_COLUMNS = (
    Comment.comentario_id,
    Comment.comentario,
    Comment.usuario_id,
    Comment.publicacion_id,
)
POST_COMMENT_COLUMNS = (Comment.comentario_id, Comment.comentario, Comment.usuario_id)


class CommentRepository(BaseRepository):
    """Data access helpers for Comment rows. There is no create operation."""

    async def list_for_post(self, post_id: str) -> list[Row]:
        return await self._fetch_all(
            select(*POST_COMMENT_COLUMNS).where(Comment.publicacion_id == post_id)
        )

    async def get(self, comment_id: str) -> Row | None:
        return await self._fetch_one(
            select(*COMMENT_COLUMNS).where(Comment.comentario_id == comment_id)
        )

    async def update(self, comment_id: str, comentario: str | None) -> None:
        await self._execute(
            update(Comment).where(Comment.comentario_id == comment_id).values(comentario=comentario)
        )

    async def delete(self, comment_id: str) -> None:
        await self._execute(delete(Comment).where(Comment.comentario_id == comment_id))


__all__ = ["COMMENT_COLUMNS", "CommentRepository", "POST_COMMENT_COLUMNS"]
