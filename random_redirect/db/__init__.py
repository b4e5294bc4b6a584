"""
Database module with abstraction layer.

This module provides:
- DatabaseAdapter interface: Abstract base class for database implementations
- SQLiteAdapter: SQLite-specific implementation (default)
- Session management: Database session creation and management

To add a new database backend, create a new adapter class inheriting
from DatabaseAdapter and return it from get_database_adapter().
"""

from random_redirect.db.interface import DatabaseAdapter
from random_redirect.db.session import get_session, async_session_maker, engine, init_models

__all__ = [
    "DatabaseAdapter",
    "get_session",
    "async_session_maker",
    "engine",
    "init_models",
]
