"""
Database Session Management

This module handles async database connections using SQLAlchemy's async
engine, configured through the database adapter.

Key Features:
- Database abstraction: Backend chosen by get_database_adapter()
- Async session management: One session per request via get_session()
- Error handling: Automatic rollback on exceptions
- init_models(): Creates missing tables for development deployments
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from random_redirect.core.setting import settings
from random_redirect.db import models  # noqa: F401  (registers tables on SQLModel.metadata)
from random_redirect.db.sqlite_adapter import get_database_adapter

logger = logging.getLogger(__name__)

db_adapter = get_database_adapter()

engine = db_adapter.create_engine(settings.DATABASE_URL)

async_session_maker = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI to get database session.

    Commits when the endpoint returns normally, rolls back when it raises.

    Usage in FastAPI:
        @router.get("/endpoint")
        async def endpoint(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_models() -> None:
    """Create any missing tables. Alembic remains the source of truth for schema changes."""
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    logger.info(f"Database tables ensured ({db_adapter.get_dialect_name()})")
