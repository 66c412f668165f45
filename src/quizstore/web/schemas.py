"""Pydantic schemas for the Web API.

Request and response bodies for questions and options.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from quizstore import __version__
from quizstore.core.models import AddOption, AddQuestion, Option, Question


# =============================================================================
# QUESTION SCHEMAS
# =============================================================================


class OptionCreate(BaseModel):
    """An option in a create request."""

    body: str
    correct: bool = False


class QuestionCreate(BaseModel):
    """Request body for creating a question."""

    body: str
    options: list[OptionCreate] = Field(default_factory=list)

    def to_model(self) -> AddQuestion:
        return AddQuestion(
            body=self.body,
            options=[AddOption(body=o.body, correct=o.correct) for o in self.options],
        )


class OptionSchema(BaseModel):
    """A persisted option."""

    id: int | None = None
    body: str
    correct: bool = False


class QuestionSchema(BaseModel):
    """A persisted question; used both as update request and response."""

    id: int | None = None
    body: str
    options: list[OptionSchema] = Field(default_factory=list)

    def to_model(self) -> Question:
        return Question(
            id=self.id,
            body=self.body,
            options=[
                Option(id=o.id, body=o.body, correct=o.correct) for o in self.options
            ],
        )

    @classmethod
    def from_model(cls, question: Question) -> QuestionSchema:
        return cls(
            id=question.id,
            body=question.body,
            options=[
                OptionSchema(id=o.id, body=o.body, correct=o.correct)
                for o in question.options
            ],
        )


class StatusResponse(BaseModel):
    """Acknowledgement of a write."""

    status: str = "ok"
    id: int | None = None


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    detail: str


# =============================================================================
# HEALTH SCHEMAS
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = __version__
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
