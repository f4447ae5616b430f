"""
User repository for data access operations on the usuarios table.
"""

from __future__ import annotations

from sqlalchemy import delete, select, update

from ..models import User
from .base import BaseRepository, Row

# Public projection; nothing else about a user leaves the gateway.
USER_COLUMNS = (User.usuarios_id, User.usuarios_nombre, User.email)


class UserRepository(BaseRepository):
    """Data access helpers for User rows."""

    async def list_all(self) -> list[Row]:
        return await self._fetch_all(select(*USER_COLUMNS))

    async def get(self, user_id: str) -> Row | None:
        """Fetch one user by id. The id is bound as-is, without type checks."""
        return await self._fetch_one(select(*USER_COLUMNS).where(User.usuarios_id == user_id))

    async def create(self, nombre: str | None, email: str | None) -> int:
        """Insert a user and return the storage-generated id."""
        return await self._insert(User(usuarios_nombre=nombre, email=email))

    async def update(self, user_id: str, nombre: str | None, email: str | None) -> None:
        await self._execute(
            update(User)
            .where(User.usuarios_id == user_id)
            .values(usuarios_nombre=nombre, email=email)
        )

    async def delete(self, user_id: str) -> None:
        await self._execute(delete(User).where(User.usuarios_id == user_id))


__all__ = ["USER_COLUMNS", "UserRepository"]
