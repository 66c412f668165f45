"""Repository functions for questions.

A question spans three tables: its own row in question_bodies, one row per
option in options, and one link row per option in questions. Every write
here runs in a single transaction so the three tables never disagree.

Updates are full replacements: all options and links of the question are
deleted and recreated, so option ids change on every update even when the
option content does not.
"""

from __future__ import annotations

import sqlite3
from typing import Sequence

import structlog

from quizstore.core.models import AddOption, Question
from quizstore.db import links_repository, options_repository
from quizstore.db.database import transaction
from quizstore.db.errors import NotFoundError, PersistenceError

logger = structlog.get_logger(__name__)


def create_question(
    conn: sqlite3.Connection,
    body: str,
    options: Sequence[AddOption],
) -> int:
    """Insert a question with its options, preserving option order.

    Args:
        conn: Connection (not already in a transaction)
        body: Question text
        options: Options in display order

    Returns:
        Generated question id

    Raises:
        PersistenceError: If any row cannot be written. Nothing is persisted.
    """
    with transaction(conn):
        try:
            cursor = conn.execute(
                "INSERT INTO question_bodies (body) VALUES (?)", (body,)
            )
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot insert question: {e}") from e
        question_id = cursor.lastrowid

        option_ids = [
            options_repository.create_option(conn, option.body, option.correct)
            for option in options
        ]

        links_repository.create_links(conn, question_id, option_ids)

    logger.info("questions.created", question_id=question_id, options=len(option_ids))
    return question_id


def read_question(conn: sqlite3.Connection, question_id: int) -> Question:
    """Get question by id with its options in order.

    Raises:
        NotFoundError: If the question does not exist
        PersistenceError: On driver failure, or if a link points at a
            missing option
    """
    try:
        row = conn.execute(
            "SELECT body FROM question_bodies WHERE id = ?", (question_id,)
        ).fetchone()
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot read question {question_id}: {e}") from e

    if row is None:
        raise NotFoundError("Question", question_id)

    return Question(
        id=question_id,
        body=row["body"],
        options=_read_options(conn, question_id),
    )


def read_all_questions(conn: sqlite3.Connection) -> list[Question]:
    """Get all questions in natural row order.

    Returns:
        List of Question, each with its options in order
    """
    try:
        rows = conn.execute("SELECT id, body FROM question_bodies").fetchall()
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot list questions: {e}") from e

    return [
        Question(
            id=row["id"],
            body=row["body"],
            options=_read_options(conn, row["id"]),
        )
        for row in rows
    ]


def update_question(conn: sqlite3.Connection, question: Question) -> None:
    """Replace a question's body and all of its options.

    The question must come from a prior read: every option in
    question.options is deleted by its id and recreated with its current
    body/correct values, then relinked in list order.

    Raises:
        NotFoundError: If question.id does not exist. Nothing is changed.
        PersistenceError: If any row cannot be written. Nothing is changed.
    """
    with transaction(conn):
        try:
            cursor = conn.execute(
                "UPDATE question_bodies SET body = ? WHERE id = ?",
                (question.body, question.id),
            )
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot update question {question.id}: {e}") from e

        if cursor.rowcount == 0:
            raise NotFoundError("Question", question.id)

        links_repository.delete_links_for_question(conn, question.id)

        option_ids = []
        for option in question.options:
            if option.id is not None:
                options_repository.delete_option(conn, option.id)
            option_ids.append(
                options_repository.create_option(conn, option.body, option.correct)
            )

        links_repository.create_links(conn, question.id, option_ids)

    logger.info("questions.updated", question_id=question.id, options=len(option_ids))


def delete_question(conn: sqlite3.Connection, question: Question) -> None:
    """Delete a question, its options and its links.

    Raises:
        NotFoundError: If question.id does not exist. Nothing is changed.
        PersistenceError: If any row cannot be deleted. Nothing is changed.
    """
    with transaction(conn):
        for option in question.options:
            if option.id is not None:
                options_repository.delete_option(conn, option.id)

        links_repository.delete_links_for_question(conn, question.id)

        try:
            cursor = conn.execute(
                "DELETE FROM question_bodies WHERE id = ?", (question.id,)
            )
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot delete question {question.id}: {e}") from e

        if cursor.rowcount == 0:
            raise NotFoundError("Question", question.id)

    logger.info("questions.deleted", question_id=question.id)


def _read_options(conn: sqlite3.Connection, question_id: int) -> list:
    """Resolve the ordered options of a question through its link rows."""
    options = []
    for option_id in links_repository.read_linked_option_ids(conn, question_id):
        try:
            options.append(options_repository.read_option(conn, option_id))
        except NotFoundError as e:
            logger.error(
                "questions.dangling_link",
                question_id=question_id,
                option_id=option_id,
            )
            raise PersistenceError(
                f"Question {question_id} links to missing option {option_id}"
            ) from e
    return options
