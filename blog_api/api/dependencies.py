"""
FastAPI dependency injection providers.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Annotated, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import Settings, get_settings
from ..db.repositories import CommentRepository, PostRepository, UserRepository
from .schemas import CommentUpdate, PostCreate, PostUpdate, RequestBody, UserWrite

LOGGER = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Type Aliases for Dependency Injection
# -----------------------------------------------------------------------------

SettingsDep = Annotated[Settings, Depends(get_settings)]


# -----------------------------------------------------------------------------
# Database Session Management
# -----------------------------------------------------------------------------

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_engine(settings: Settings) -> AsyncEngine:
    """Create or return the process-wide async engine and its pool."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            settings.database.dsn,
            pool_size=settings.database.pool_size,
            echo=settings.database.echo,
        )
    return _engine


def _get_session_factory(settings: Settings) -> async_sessionmaker[AsyncSession]:
    """Create or return cached session factory."""
    global _session_factory
    if _session_factory is None:
        engine = _get_engine(settings)
        _session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_db(
    settings: SettingsDep,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session scoped to one request.

    Repositories commit their own single statement, so the session is only
    opened and closed here.
    """
    factory = _get_session_factory(settings)
    async with factory() as session:
        yield session


DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


# -----------------------------------------------------------------------------
# Repository Dependencies
# -----------------------------------------------------------------------------


async def get_user_repository(session: DbSessionDep) -> UserRepository:
    """Provide UserRepository with current session."""
    return UserRepository(session)


async def get_post_repository(session: DbSessionDep) -> PostRepository:
    """Provide PostRepository with current session."""
    return PostRepository(session)


async def get_comment_repository(session: DbSessionDep) -> CommentRepository:
    """Provide CommentRepository with current session."""
    return CommentRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


# -----------------------------------------------------------------------------
# Request Body Parsing
# -----------------------------------------------------------------------------

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

BodyT = TypeVar("BodyT", bound=RequestBody)


def request_body(model: type[BodyT]) -> Callable[[Request], Awaitable[BodyT]]:
    """
    Build a dependency that reads ``model`` from a JSON or form-encoded body.

    A missing body, or a body in any other content type, yields a model
    with every field unset, so the statement receives NULLs.
    """

    async def _read_body(request: Request) -> BodyT:
        content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
        payload: object = {}

        if content_type == FORM_CONTENT_TYPE:
            payload = dict(await request.form())
        elif content_type == JSON_CONTENT_TYPE and await request.body():
            try:
                payload = await request.json()
            except ValueError as exc:
                raise RequestValidationError(
                    [
                        {
                            "type": "json_invalid",
                            "loc": ("body",),
                            "msg": "JSON decode error",
                            "input": {},
                        }
                    ]
                ) from exc

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False)) from exc

    return _read_body


UserBodyDep = Annotated[UserWrite, Depends(request_body(UserWrite))]
PostCreateBodyDep = Annotated[PostCreate, Depends(request_body(PostCreate))]
PostUpdateBodyDep = Annotated[PostUpdate, Depends(request_body(PostUpdate))]
CommentBodyDep = Annotated[CommentUpdate, Depends(request_body(CommentUpdate))]


# -----------------------------------------------------------------------------
# Lifecycle Helpers
# -----------------------------------------------------------------------------


@asynccontextmanager
async def lifespan_dependencies(settings: Settings) -> AsyncIterator[None]:
    """
    Context manager for application lifespan.

    Opens the engine at startup and disposes of its pool at shutdown.
    """
    global _engine, _session_factory

    LOGGER.info(
        "Initializing database engine for %s",
        settings.database.dsn.render_as_string(hide_password=True),
    )
    _get_engine(settings)
    _get_session_factory(settings)

    try:
        yield
    finally:
        LOGGER.info("Shutting down application dependencies...")

        if _engine:
            await _engine.dispose()
            _engine = None
            _session_factory = None


__all__ = [
    "CommentBodyDep",
    "CommentRepoDep",
    "DbSessionDep",
    "PostCreateBodyDep",
    "PostRepoDep",
    "PostUpdateBodyDep",
    "SettingsDep",
    "UserBodyDep",
    "UserRepoDep",
    "get_comment_repository",
    "get_db",
    "get_post_repository",
    "get_settings",
    "get_user_repository",
    "lifespan_dependencies",
    "request_body",
]
