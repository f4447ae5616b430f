"""
Shared pytest fixtures for the database, the ASGI app and the HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from blog_api.api.dependencies import get_db
from blog_api.api.main import create_app
from blog_api.db.models import Base

Seeder = Callable[..., Awaitable[list[Any]]]


@pytest.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    """Provide an async in-memory SQLite engine with the three tables created.

    StaticPool keeps a single connection so every session sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session for repository-level tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed(session_factory: async_sessionmaker[AsyncSession]) -> Seeder:
    """Persist ORM instances in their own committed session and return them."""

    async def _seed(*instances: Any) -> list[Any]:
        async with session_factory() as session:
            session.add_all(instances)
            await session.commit()
        return list(instances)

    return _seed


def _override_db(factory: async_sessionmaker[AsyncSession]) -> Callable[[], AsyncIterator]:
    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with factory() as session:
            yield session

    return _get_db


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]) -> FastAPI:
    """Application wired to the test database."""
    application = create_app()
    application.dependency_overrides[get_db] = _override_db(session_factory)
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def broken_client(tmp_path: Any) -> AsyncIterator[AsyncClient]:
    """Client whose database cannot be opened, so every query fails."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/blog.db")
    application = create_app()
    application.dependency_overrides[get_db] = _override_db(async_sessionmaker(engine))
    try:
        async with AsyncClient(
            transport=ASGITransport(app=application), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        await engine.dispose()
