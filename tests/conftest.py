"""Pytest configuration for phased testing.

Tests are organized by phase:
- f1: schema, option store, link table
- f2: question store, bootstrap, question service
- f3: configuration, Web API, CLI

Future phase tests are automatically skipped.
"""

import sqlite3

import pytest

from quizstore.db.database import connect, initialize

# Current implementation phase
CURRENT_PHASE = 3


def pytest_collection_modifyitems(config, items):
    """Skip tests from phases that haven't been implemented yet."""
    for item in items:
        # Extract phase from path (tests/f2/... -> 2)
        parts = item.fspath.strpath.split("/")
        for part in parts:
            if part.startswith("f") and part[1:].isdigit():
                test_phase = int(part[1:])
                if test_phase > CURRENT_PHASE:
                    item.add_marker(
                        pytest.mark.skip(
                            reason=f"Phase F{test_phase} not yet implemented (current: F{CURRENT_PHASE})"
                        )
                    )
                break


@pytest.fixture
def conn():
    """In-memory database with schema created."""
    connection = connect(":memory:")
    initialize(connection)
    yield connection
    connection.close()


@pytest.fixture
def row_count():
    """Count rows of a table directly, bypassing the repositories."""

    def _count(connection: sqlite3.Connection, table: str, where: str = "", params=()) -> int:
        sql = f"SELECT COUNT(*) FROM {table}"
        if where:
            sql += f" WHERE {where}"
        return connection.execute(sql, params).fetchone()[0]

    return _count


@pytest.fixture
def question_row(conn):
    """Insert a bare question_bodies row and return its id."""
    cursor = conn.execute("INSERT INTO question_bodies (body) VALUES (?)", ("q",))
    return cursor.lastrowid
