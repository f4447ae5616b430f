"""
Base repository class with shared utilities.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.sql.expression import Executable
from sqlalchemy.ext.asyncio import AsyncSession

Row = dict[str, Any]


class BaseRepository:
    """
    Base class for all repositories.

    Every public method issues exactly one statement. Values coming from the
    request are always passed as bound parameters.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Expose the underlying session for transaction management."""
        return self._session

    async def _fetch_all(self, stmt: Executable) -> list[Row]:
        """Run a SELECT and return every row as a plain dict."""
        result = await self._session.execute(stmt)
        return [dict(row) for row in result.mappings()]

    async def _fetch_one(self, stmt: Executable) -> Row | None:
        """Run a SELECT and return the first row, or None when nothing matched."""
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def _execute(self, stmt: Executable) -> None:
        """Run a single UPDATE/DELETE and commit it."""
        await self._session.execute(stmt, execution_options={"synchronize_session": False})
        await self._session.commit()

    async def _insert(self, instance: Any) -> Any:
        """Persist a new ORM instance, commit, and return its generated primary key."""
        self._session.add(instance)
        await self._session.flush()
        (identity,) = instance.__mapper__.primary_key_from_instance(instance)
        await self._session.commit()
        return identity


__all__ = ["BaseRepository", "Row"]
