"""
SQLite Database Adapter

Implements the DatabaseAdapter interface for SQLite through aiosqlite.
Reads dominate this service (one lookup per redirect, writes only on
admin submissions), which suits SQLite's single-writer model.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from random_redirect.db.interface import DatabaseAdapter


class SQLiteAdapter(DatabaseAdapter):
    """SQLite database adapter implementation."""

    def __init__(self, echo: bool = False):
        self.echo = echo

    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        """
        Create SQLite async engine.

        Caller-supplied kwargs override the adapter defaults, including
        poolclass (tests pass StaticPool for in-memory databases).
        """
        engine_kwargs = self.get_engine_kwargs()
        engine_kwargs.setdefault("poolclass", self.get_pool_class())
        engine_kwargs.update(kwargs)

        return create_async_engine(
            database_url,
            connect_args=self.get_connect_args(),
            **engine_kwargs
        )

    def get_pool_class(self) -> type[NullPool]:
        # File-based database gains nothing from pooling
        return NullPool

    def get_connect_args(self) -> dict[str, Any]:
        # Required for aiosqlite's worker thread
        return {"check_same_thread": False}

    def get_engine_kwargs(self) -> dict[str, Any]:
        return {"echo": self.echo}

    def get_dialect_name(self) -> str:
        return "sqlite"


def get_database_adapter() -> DatabaseAdapter:
    """
    Factory function to get the database adapter.

    Returns SQLiteAdapter by default. To switch to PostgreSQL, create a
    PostgreSQLAdapter class and update this function.
    """
    return SQLiteAdapter()
