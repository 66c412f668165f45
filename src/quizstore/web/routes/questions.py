"""Question endpoints.

Store errors are not caught here; the handlers registered in
quizstore.web.api map them to 400/404/500 responses.
"""

import structlog
from fastapi import APIRouter, Depends, Request, status

from quizstore.core.question_service import QuestionService, parse_question_id
from quizstore.web.schemas import (
    ErrorResponse,
    QuestionCreate,
    QuestionSchema,
    StatusResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/question",
    tags=["questions"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_question_service(request: Request) -> QuestionService:
    """Service instance created by create_app()."""
    return request.app.state.question_service


@router.get("", response_model=list[QuestionSchema])
def list_questions(
    service: QuestionService = Depends(get_question_service),
) -> list[QuestionSchema]:
    """List all questions."""
    questions = service.get_all_questions()
    logger.info("questions_list", count=len(questions))
    return [QuestionSchema.from_model(q) for q in questions]


@router.get("/{question_id}", response_model=QuestionSchema)
def get_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> QuestionSchema:
    """Get a question with its options in order."""
    question = service.get_question(parse_question_id(question_id))
    return QuestionSchema.from_model(question)


@router.post("", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    payload: QuestionCreate,
    service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    """Create a question with its options."""
    new_question = payload.to_model()
    question_id = service.create_question(new_question.body, new_question.options)
    return StatusResponse(status="ok", id=question_id)


@router.put("", response_model=StatusResponse)
def update_question(
    payload: QuestionSchema,
    service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    """Replace a question's body and options.

    Send back a question as returned by GET, edited in place. Option ids
    change on every update.
    """
    question = payload.to_model()
    service.update_question(question)
    return StatusResponse(status="ok", id=question.id)


@router.delete("/{question_id}", response_model=StatusResponse)
def delete_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    """Delete a question and its options."""
    question = service.get_question(parse_question_id(question_id))
    service.delete_question(question)
    return StatusResponse(status="ok", id=question.id)
