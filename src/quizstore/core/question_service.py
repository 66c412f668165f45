"""Question service: the operations exposed to the HTTP layer and CLI.

Each call opens its own connection and closes it before returning.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

import structlog

from quizstore.core.models import AddOption, AddQuestion, Question
from quizstore.db import questions_repository
from quizstore.db.bootstrap import DEFAULT_SEED, bootstrap_store
from quizstore.db.database import get_db
from quizstore.db.errors import ValidationError

logger = structlog.get_logger(__name__)


def parse_question_id(raw: Any) -> int:
    """Parse a question id from user input.

    Raises:
        ValidationError: If raw is not an integer
    """
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid question id: {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip(), 10)
    except ValueError as e:
        raise ValidationError(f"Invalid question id: {raw!r}") from e


class QuestionService:
    """Question CRUD against one SQLite file."""

    def __init__(self, db_path: Path | str, seed: AddQuestion | None = DEFAULT_SEED):
        self.db_path = Path(db_path)
        self.seed = seed

    def initialize(self) -> bool:
        """Create schema and seed question if the database file is new.

        Returns:
            True if a new database was created
        """
        return bootstrap_store(self.db_path, self.seed)

    def create_question(
        self,
        body: str,
        options: Sequence[AddOption | dict[str, Any]],
    ) -> int:
        """Create a question. Returns its id."""
        add_options = [
            o if isinstance(o, AddOption) else AddOption.from_dict(o) for o in options
        ]
        with get_db(self.db_path) as conn:
            return questions_repository.create_question(conn, body, add_options)

    def get_question(self, question_id: int) -> Question:
        """Get one question. Raises NotFoundError if absent."""
        question_id = parse_question_id(question_id)
        with get_db(self.db_path) as conn:
            return questions_repository.read_question(conn, question_id)

    def get_all_questions(self) -> list[Question]:
        with get_db(self.db_path) as conn:
            return questions_repository.read_all_questions(conn)

    def update_question(self, question: Question) -> None:
        """Replace a question previously obtained from get_question."""
        question = replace(question, id=self._require_id(question))
        with get_db(self.db_path) as conn:
            questions_repository.update_question(conn, question)

    def delete_question(self, question: Question) -> None:
        """Delete a question previously obtained from get_question."""
        question = replace(question, id=self._require_id(question))
        with get_db(self.db_path) as conn:
            questions_repository.delete_question(conn, question)

    @staticmethod
    def _require_id(question: Question) -> int:
        if question.id is None:
            raise ValidationError("Question id is required")
        return parse_question_id(question.id)
