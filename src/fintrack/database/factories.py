"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "FINTRACK_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".fintrack"
DEFAULT_DB_FILENAME = "fintrack.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file to use.

    An explicit path wins, then FINTRACK_DB_PATH, then the per-user default
    under DEFAULT_DB_DIR, which is created on demand.
    """
    if database_path is not None:
        return Path(database_path)

    from_env = os.environ.get(DB_PATH_ENV)
    if from_env:
        return Path(from_env)

    DEFAULT_DB_DIR.mkdir(parents=True, exist_ok=True)
    return DEFAULT_DB_DIR / DEFAULT_DB_FILENAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file, see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance configured for SQLite

    Raises:
        StorageError: If the file cannot be opened
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
