"""
collabhub/db/connection.py

Handles database connection setup and schema initialization.
Responsible for:
 - Creating SQLite connections
 - Loading and executing schema definitions from tables.sql
"""

import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DB = "collabhub.db"
SCHEMA_PATH = Path(__file__).parent / "schema" / "tables.sql"


def connect(db_path: str | Path | None = None) -> sqlite3.Connection:
    target = str(db_path) if db_path is not None else os.getenv("APP_DB_PATH", DEFAULT_DB)
    if target != ":memory:":
        Path(target).parent.mkdir(parents=True, exist_ok=True)

    # FastAPI may open the connection and run the endpoint on different pool threads
    conn = sqlite3.connect(target, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON;")
    if target != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes if they don't exist."""
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema_sql = f.read()

    conn.executescript(schema_sql)
    conn.commit()
    logger.debug("Initialized database schema from %s", SCHEMA_PATH)
