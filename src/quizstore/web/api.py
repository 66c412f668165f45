"""FastAPI application factory.

Main entry point for the question store Web API.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from quizstore import __version__
from quizstore.config.app_config import AppConfig, load_app_config
from quizstore.core.question_service import QuestionService
from quizstore.db.errors import NotFoundError, PersistenceError, ValidationError
from quizstore.web.routes import health_router, questions_router
from quizstore.web.schemas import ErrorResponse

logger = structlog.get_logger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    """Map store errors to HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(detail=str(exc)).model_dump(),
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(detail=str(exc)).model_dump(),
        )

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("api_persistence_error", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(detail=str(exc)).model_dump(),
        )


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Bootstraps the database file on first run.

    Args:
        config: Settings to use. Defaults to load_app_config()

    Returns:
        Configured FastAPI app instance

    Raises:
        SchemaInitializationError: If a fresh database cannot be initialized
    """
    config = config or load_app_config()

    service = QuestionService(config.database.path, seed=config.seed)
    created = service.initialize()
    logger.info(
        "api_startup",
        db_path=str(config.database.path),
        db_created=created,
    )

    app = FastAPI(
        title="Quiz Store API",
        description="CRUD API for quiz questions and their ordered options",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.question_service = service

    _register_error_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(questions_router)

    return app
