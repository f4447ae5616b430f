"""
Error taxonomy for the gateway and the helper that maps storage failures onto it.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

LOGGER = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base exception carrying the client-facing message and HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(GatewayError):
    """Raised when a single-row lookup returns nothing."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(GatewayError):
    """Raised when the query layer fails for any reason."""


@asynccontextmanager
async def storage_guard(session: AsyncSession, message: str) -> AsyncIterator[None]:
    """
    Translate any SQLAlchemy failure inside the block into a StorageError.

    The underlying exception is logged server-side only; the client gets
    ``message``. The session is rolled back so it can be closed cleanly; a
    failing rollback is logged and does not change the outcome.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        LOGGER.error("%s: %s", message, exc)
        try:
            await session.rollback()
        except Exception as rollback_exc:
            LOGGER.warning("Rollback after failed query also failed: %s", rollback_exc)
        raise StorageError(message) from exc


__all__ = ["GatewayError", "NotFoundError", "StorageError", "storage_guard"]
