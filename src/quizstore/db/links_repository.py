"""Repository functions for the questions link table.

A link row (question_id, option_id, option_order) says "option_id is the
option at position option_order of question_id". It is the only place
option ordering is stored.
"""

from __future__ import annotations

import sqlite3
from typing import Sequence

import structlog

from quizstore.db.errors import PersistenceError

logger = structlog.get_logger(__name__)


def create_links(
    conn: sqlite3.Connection,
    question_id: int,
    option_ids: Sequence[int],
) -> None:
    """Insert one link row per option, using its index as option_order.

    Args:
        conn: Connection with an open transaction
        question_id: Owning question
        option_ids: Option ids in display order

    Raises:
        PersistenceError: If any insert fails (e.g. uniqueness violation).
            Rows inserted before the failure stay in the caller's transaction.
    """
    for order, option_id in enumerate(option_ids):
        try:
            conn.execute(
                """
                INSERT INTO questions (question_id, option_id, option_order)
                VALUES (?, ?, ?)
                """,
                (question_id, option_id, order),
            )
        except sqlite3.Error as e:
            logger.error(
                "links.insert_failed",
                question_id=question_id,
                option_id=option_id,
                option_order=order,
                error=str(e),
            )
            raise PersistenceError(
                f"Cannot link option {option_id} to question {question_id}: {e}"
            ) from e

    logger.debug("links.inserted", question_id=question_id, count=len(option_ids))


def read_linked_option_ids(conn: sqlite3.Connection, question_id: int) -> list[int]:
    """Get option ids of a question, ordered by option_order ascending."""
    try:
        rows = conn.execute(
            """
            SELECT option_id FROM questions
            WHERE question_id = ?
            ORDER BY option_order ASC
            """,
            (question_id,),
        ).fetchall()
    except sqlite3.Error as e:
        raise PersistenceError(
            f"Cannot read options of question {question_id}: {e}"
        ) from e

    return [row["option_id"] for row in rows]


def delete_links_for_question(conn: sqlite3.Connection, question_id: int) -> None:
    """Delete all link rows of a question. No-op if there are none."""
    try:
        cursor = conn.execute(
            "DELETE FROM questions WHERE question_id = ?", (question_id,)
        )
    except sqlite3.Error as e:
        raise PersistenceError(
            f"Cannot delete links of question {question_id}: {e}"
        ) from e

    logger.debug("links.deleted", question_id=question_id, rows=cursor.rowcount)


def delete_link(conn: sqlite3.Connection, question_id: int, option_id: int) -> None:
    """Delete the single link row between a question and an option."""
    try:
        conn.execute(
            "DELETE FROM questions WHERE question_id = ? AND option_id = ?",
            (question_id, option_id),
        )
    except sqlite3.Error as e:
        raise PersistenceError(
            f"Cannot unlink option {option_id} from question {question_id}: {e}"
        ) from e
