"""Repository functions for the options table.

Write functions expect to run inside a transaction opened by the caller;
they never commit or roll back themselves.
"""

from __future__ import annotations

import sqlite3

import structlog

from quizstore.core.models import Option
from quizstore.db.errors import NotFoundError, PersistenceError

logger = structlog.get_logger(__name__)


def create_option(conn: sqlite3.Connection, body: str, correct: bool) -> int:
    """Insert a new option row.

    Args:
        conn: Connection with an open transaction
        body: Option text
        correct: Whether this option is a correct answer

    Returns:
        Generated option id

    Raises:
        PersistenceError: If the insert fails
    """
    try:
        cursor = conn.execute(
            "INSERT INTO options (body, correct) VALUES (?, ?)",
            (body, correct),
        )
    except sqlite3.Error as e:
        logger.error("options.insert_failed", error=str(e))
        raise PersistenceError(f"Cannot insert option: {e}") from e

    option_id = cursor.lastrowid
    logger.debug("options.inserted", option_id=option_id)
    return option_id


def read_option(conn: sqlite3.Connection, option_id: int) -> Option:
    """Get option by id.

    Raises:
        NotFoundError: If no row matches
        PersistenceError: On driver failure
    """
    try:
        row = conn.execute(
            "SELECT body, correct FROM options WHERE id = ?", (option_id,)
        ).fetchone()
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot read option {option_id}: {e}") from e

    if row is None:
        raise NotFoundError("Option", option_id)

    return _row_to_option(option_id, row)


def delete_option(conn: sqlite3.Connection, option_id: int) -> None:
    """Delete option by id. Deleting a missing id is not an error."""
    try:
        cursor = conn.execute("DELETE FROM options WHERE id = ?", (option_id,))
    except sqlite3.Error as e:
        logger.error("options.delete_failed", option_id=option_id, error=str(e))
        raise PersistenceError(f"Cannot delete option {option_id}: {e}") from e

    logger.debug("options.deleted", option_id=option_id, rows=cursor.rowcount)


def _row_to_option(option_id: int, row) -> Option:
    """Convert database row to Option."""
    return Option(
        id=option_id,
        body=row["body"],
        correct=bool(row["correct"]),
    )
