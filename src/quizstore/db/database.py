"""SQLite connection, transaction and schema management.

Connections are opened in autocommit mode so that every multi-row write
is wrapped explicitly in transaction(), which commits on success and
rolls back on any error.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import structlog

from quizstore.db.errors import PersistenceError, SchemaInitializationError

logger = structlog.get_logger(__name__)

# Default database location
DEFAULT_DB_PATH = Path("data.sqlite3")

# Table DDL, kept byte-compatible with existing data.sqlite3 files
SCHEMA_STATEMENTS = (
    """
    CREATE TABLE "options" (
        "id"	INTEGER NOT NULL UNIQUE,
        "body"	TEXT NOT NULL,
        "correct"	INTEGER NOT NULL,
        PRIMARY KEY("id" AUTOINCREMENT)
    )
    """,
    """
    CREATE TABLE "question_bodies" (
        "id"	INTEGER NOT NULL UNIQUE,
        "body"	TEXT NOT NULL,
        PRIMARY KEY("id")
    )
    """,
    """
    CREATE TABLE "questions" (
        "question_id"	INTEGER NOT NULL,
        "option_id"	INTEGER NOT NULL,
        "option_order"	INTEGER,
        FOREIGN KEY("question_id") REFERENCES "question_bodies"("id"),
        FOREIGN KEY("option_id") REFERENCES "options"("id"),
        UNIQUE("option_id","question_id","option_order"),
        PRIMARY KEY("question_id","option_id")
    )
    """,
)


def connect(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Open a connection to the question database.

    Args:
        db_path: Path to database file, or ":memory:". Defaults to ./data.sqlite3

    Returns:
        SQLite connection in autocommit mode with row factory set to sqlite3.Row

    Raises:
        PersistenceError: If the file cannot be opened
    """
    path = db_path if db_path is not None else DEFAULT_DB_PATH

    try:
        conn = sqlite3.connect(str(path), isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot open database {path}: {e}") from e

    return conn


@contextmanager
def get_db(db_path: Path | str | None = None) -> Generator[sqlite3.Connection, None, None]:
    """Get database connection as context manager.

    The connection is scoped to the block and always closed on exit.

    Example:
        with get_db(path) as conn:
            question = read_question(conn, 1)
    """
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Connection, None, None]:
    """Run a block inside a single write transaction.

    Commits if the block completes, rolls back if it raises. Foreign key
    checks are deferred to COMMIT so rows can be deleted in any order
    within the block.

    Raises:
        PersistenceError: If BEGIN/COMMIT fails, or a raw sqlite3.Error
            escapes the block
    """
    began = False
    try:
        conn.execute("BEGIN")
        began = True
        conn.execute("PRAGMA defer_foreign_keys = ON")
    except sqlite3.Error as e:
        # An outer transaction that BEGIN collided with belongs to the caller
        if began:
            conn.execute("ROLLBACK")
        raise PersistenceError(f"Cannot begin transaction: {e}") from e

    try:
        yield conn
        conn.execute("COMMIT")
    except Exception as e:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        logger.debug("transaction.rolled_back", error=str(e))
        if isinstance(e, sqlite3.Error):
            raise PersistenceError(str(e)) from e
        raise


def initialize(conn: sqlite3.Connection) -> None:
    """Create the options, question_bodies and questions tables.

    Must run exactly once, on a fresh database file.

    Raises:
        SchemaInitializationError: If any statement fails; nothing is created
    """
    try:
        with transaction(conn):
            for statement in SCHEMA_STATEMENTS:
                conn.execute(statement)
    except PersistenceError as e:
        logger.error("database.schema_failed", error=str(e))
        raise SchemaInitializationError(f"Schema creation failed: {e}") from e

    logger.info("database.initialized")
