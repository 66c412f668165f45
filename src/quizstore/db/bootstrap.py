"""First-run bootstrap: create the schema and seed an example question."""

from __future__ import annotations

from pathlib import Path

import structlog

from quizstore.core.models import AddOption, AddQuestion
from quizstore.db.database import get_db, initialize
from quizstore.db.questions_repository import create_question

logger = structlog.get_logger(__name__)

DEFAULT_SEED = AddQuestion(
    body="a",
    options=[
        AddOption(body="b", correct=True),
        AddOption(body="c", correct=False),
    ],
)


def bootstrap_store(db_path: Path, seed: AddQuestion | None = DEFAULT_SEED) -> bool:
    """Initialize a fresh database file and seed it.

    Existing files are left untouched. If schema creation or seeding fails
    the partially created file is removed, so the next run starts over.

    Args:
        db_path: Path to database file
        seed: Question to insert after schema creation (None skips seeding)

    Returns:
        True if a new database was created, False if it already existed

    Raises:
        SchemaInitializationError: If the schema cannot be created
        PersistenceError: If the seed question cannot be written
    """
    db_path = Path(db_path)
    if db_path.exists():
        return False

    db_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with get_db(db_path) as conn:
            initialize(conn)
            if seed is not None:
                create_question(conn, seed.body, seed.options)
    except Exception:
        logger.exception("database.bootstrap_failed", path=str(db_path))
        db_path.unlink(missing_ok=True)
        raise

    logger.info("database.bootstrapped", path=str(db_path), seeded=seed is not None)
    return True
