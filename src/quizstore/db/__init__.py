"""Database module for SQLite persistence.

Provides:
- Connection and transaction management
- Schema initialization
- Repository functions for options, links and questions
- First-run bootstrap
"""

from quizstore.db.database import connect, get_db, initialize, transaction
from quizstore.db.errors import (
    NotFoundError,
    PersistenceError,
    QuizStoreError,
    SchemaInitializationError,
    ValidationError,
)

__all__ = [
    "connect",
    "get_db",
    "initialize",
    "transaction",
    "NotFoundError",
    "PersistenceError",
    "QuizStoreError",
    "SchemaInitializationError",
    "ValidationError",
]
