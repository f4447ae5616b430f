"""
Post repository for data access operations on the publicaciones table.
"""

from __future__ import annotations

from sqlalchemy import Select, delete, literal_column, select, update

from ..models import Post
from .base import BaseRepository, Row

POST_SUMMARY_COLUMNS = (Post.publicaciones_id, Post.titulo, Post.contenido, Post.usuarios_id)


def _all_columns() -> Select:
    """``SELECT * FROM publicaciones``; rows carry whatever columns the table has."""
    return select(literal_column("*")).select_from(Post.__table__)


class PostRepository(BaseRepository):
    """Data access helpers for Post rows."""

    async def list_all(self) -> list[Row]:
        """Return every post with all of its columns."""
        return await self._fetch_all(_all_columns())

    async def get(self, post_id: str) -> Row | None:
        return await self._fetch_one(
            select(*POST_SUMMARY_COLUMNS).where(Post.publicaciones_id == post_id)
        )

    async def create(
        self,
        titulo: str | None,
        contenido: str | None,
        usuarios_id: int | None,
    ) -> int:
        """Insert a post and return the storage-generated id."""
        return await self._insert(Post(titulo=titulo, contenido=contenido, usuarios_id=usuarios_id))

    async def update(self, post_id: str, titulo: str | None, contenido: str | None) -> None:
        await self._execute(
            update(Post)
            .where(Post.publicaciones_id == post_id)
            .values(titulo=titulo, contenido=contenido)
        )

    async def delete(self, post_id: str) -> None:
        await self._execute(delete(Post).where(Post.publicaciones_id == post_id))

    async def list_by_category(self, categoria_id: str) -> list[Row]:
        return await self._fetch_all(_all_columns().where(Post.categoria_id == categoria_id))

    async def search_by_title(self, titulo: str) -> list[Row]:
        """
        Return posts whose title contains ``titulo``.

        The value is wrapped in ``%...%`` and bound as a LIKE pattern, so
        ``%`` and ``_`` in the input keep their wildcard meaning. Case
        sensitivity follows the storage collation.
        """
        return await self._fetch_all(_all_columns().where(Post.titulo.like(f"%{titulo}%")))


__all__ = ["POST_SUMMARY_COLUMNS", "PostRepository"]
