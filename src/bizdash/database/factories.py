"""Record store factory functions."""

from typing import Optional

from bizdash.config import default_database_path
from bizdash.database.sqlalchemy_db import SQLAlchemyRecordStore


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyRecordStore:
    """Create a SQLite-backed record store.

    Args:
        database_path: Path to SQLite database file. If None, defaults to
            ~/.bizdash/bizdash.db

    Returns:
        SQLAlchemyRecordStore instance configured for SQLite
    """
    if database_path is None:
        database_path = default_database_path()

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyRecordStore(database_url)
