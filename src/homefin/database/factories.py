"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from homefin.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks HOMEFIN_DB_PATH
            environment variable, then defaults to ~/.homefin/homefin.db. Missing
            parent directories are created.

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("HOMEFIN_DB_PATH")

    if database_path is None:
        # Default to ~/.homefin/homefin.db
        db_file = Path.home() / ".homefin" / "homefin.db"
    else:
        db_file = Path(database_path).expanduser()

    # SQLite creates the file but not its directory
    db_file.parent.mkdir(parents=True, exist_ok=True)
    database_path = str(db_file)

    logger.debug("Opening SQLite database at %s", database_path)
    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
