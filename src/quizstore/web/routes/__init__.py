"""Route handlers for the Web API."""

from quizstore.web.routes.health import router as health_router
from quizstore.web.routes.questions import router as questions_router

__all__ = [
    "health_router",
    "questions_router",
]
