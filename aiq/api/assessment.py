"""API endpoints for scoring, submitting and verifying assessments."""

from fastapi import APIRouter, Depends, HTTPException

from aiq.core.certificates import normalize_certificate_code
from aiq.core.config import get_settings
from aiq.core.logging import get_logger
from aiq.core.schemas_assessment import (
    EvaluateRequest,
    EvaluateResponse,
    SubmitAssessmentRequest,
)
from aiq.core.scoring import evaluate, explain
from aiq.core.scoring.types import CompositeResult, VerificationResult
from aiq.core.session import AssessmentSession, complete_session
from aiq.core.verification import verify_certificate
from aiq.db.result_store import ResultStore, get_result_store

logger = get_logger(__name__)

router = APIRouter()


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_response(data: EvaluateRequest) -> EvaluateResponse:
    """Score a single response without storing anything."""
    return EvaluateResponse(
        breakdown=evaluate(data.response, data.question_number),
        categories=explain(data.response, data.question_number),
    )


@router.post("/assessments", response_model=CompositeResult, status_code=201)
async def submit_assessment(
    data: SubmitAssessmentRequest,
    store: ResultStore = Depends(get_result_store),
) -> CompositeResult:
    """
    Score a completed questionnaire and store it as the current result.

    Args:
        data: Responses keyed by question number

    Returns:
        The stored result including its certificate code

    Raises:
        HTTPException 422: If a question number is out of range
        HTTPException 500: If the result could not be stored
    """
    session = AssessmentSession(total_questions=get_settings().TOTAL_QUESTIONS)

    try:
        for question_number, text in data.responses.items():
            # Unanswered slots must still name a real question
            session.check_question_number(question_number)
            if text is not None:
                session.record_response(question_number, text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        return complete_session(session, store)
    except Exception:
        logger.exception("Failed to complete assessment")
        raise HTTPException(status_code=500, detail="Failed to store assessment result")


@router.get("/results/latest", response_model=CompositeResult)
async def get_latest_result(
    store: ResultStore = Depends(get_result_store),
) -> CompositeResult:
    """Return the most recent stored result."""
    result = store.get()
    if result is None:
        raise HTTPException(status_code=404, detail="No result stored")
    return result


@router.get("/certificates/{code}/verify", response_model=VerificationResult)
async def verify(
    code: str,
    store: ResultStore = Depends(get_result_store),
) -> VerificationResult:
    """Verify a certificate code against the stored result."""
    normalized = normalize_certificate_code(code)
    if not normalized:
        raise HTTPException(status_code=422, detail="Please enter a certificate code")

    return verify_certificate(normalized, store)
