"""Shared fixtures. Every test session runs against a throwaway SQLite file."""

import os
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path

# Must be set before petbook.config is imported anywhere.
_DB_DIR = tempfile.mkdtemp(prefix="petbook-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'petbook.db'}"
os.environ["APP_ENV"] = "test"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from petbook.application.services import get_record_cache
from petbook.infrastructure.database import Base, async_session_factory, engine


@pytest_asyncio.fixture
async def database() -> AsyncIterator[None]:
    """Fresh cats/dogs tables for one test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(database: None) -> AsyncIterator[AsyncSession]:
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(database: None) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app with an empty store and a reset record cache."""
    from petbook.main import app

    get_record_cache().reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    get_record_cache().reset()
