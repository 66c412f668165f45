"""Error taxonomy for the question store.

- NotFoundError: a lookup by id matched zero rows
- ValidationError: malformed caller input (e.g. unparseable id)
- PersistenceError: any underlying SQLite failure
"""

from __future__ import annotations


class QuizStoreError(Exception):
    """Base error for the question store."""

    pass


class NotFoundError(QuizStoreError):
    """Lookup by id matched no row."""

    def __init__(self, entity: str, entity_id: int | str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class ValidationError(QuizStoreError):
    """Caller supplied malformed input."""

    pass


class PersistenceError(QuizStoreError):
    """Underlying storage failure (constraint, I/O, bad statement)."""

    pass


class SchemaInitializationError(PersistenceError):
    """Schema could not be created; the process cannot continue."""

    pass
