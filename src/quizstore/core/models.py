"""Question and option data classes.

Question/Option carry store-assigned ids; AddQuestion/AddOption describe
values that have not been persisted yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AddOption:
    """An option to be created."""

    body: str
    correct: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"body": self.body, "correct": self.correct}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddOption:
        return cls(body=data["body"], correct=bool(data.get("correct", False)))


@dataclass
class Option:
    """A persisted option. Owned by exactly one question."""

    id: int | None
    body: str
    correct: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (id omitted when unset)."""
        result: dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        result["body"] = self.body
        result["correct"] = self.correct
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Option:
        return cls(
            id=data.get("id"),
            body=data["body"],
            correct=bool(data.get("correct", False)),
        )


@dataclass
class AddQuestion:
    """A question to be created, with its options in display order."""

    body: str
    options: list[AddOption] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "body": self.body,
            "options": [o.to_dict() for o in self.options],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddQuestion:
        return cls(
            body=data["body"],
            options=[AddOption.from_dict(o) for o in data.get("options", [])],
        )


@dataclass
class Question:
    """A persisted question with its options in option_order order."""

    id: int | None
    body: str
    options: list[Option] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (id omitted when unset)."""
        result: dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        result["body"] = self.body
        result["options"] = [o.to_dict() for o in self.options]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Question:
        return cls(
            id=data.get("id"),
            body=data["body"],
            options=[Option.from_dict(o) for o in data.get("options", [])],
        )
