"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. StaticPool keeps a
single connection open so all sessions see the same in-memory data.
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from random_redirect.core.rate_limit import limiter
from random_redirect.db import models  # noqa: F401
from random_redirect.db.session import get_session
from random_redirect.db.sqlite_adapter import SQLiteAdapter


@pytest.fixture
async def engine():
    engine = SQLiteAdapter().create_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """HTTP client bound to the app, with the test database and no rate limits."""
    from random_redirect.main import app

    async def override_get_session():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = False

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    limiter.enabled = True
    app.dependency_overrides.clear()
