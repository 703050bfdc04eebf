"""Pydantic schemas for the assessment API."""

from pydantic import BaseModel, Field

from aiq.core.scoring.types import CategoryScore, CategoryScoreBreakdown


class EvaluateRequest(BaseModel):
    response: str = Field(..., description="Response text to score (may be empty)")
    question_number: int = Field(default=1, ge=1, description="1-based question position")


class EvaluateResponse(BaseModel):
    breakdown: CategoryScoreBreakdown
    categories: dict[str, CategoryScore] = Field(
        default_factory=dict, description="Per-category scores with the rules that fired"
    )


class SubmitAssessmentRequest(BaseModel):
    responses: dict[int, str | None] = Field(
        ..., description="Question number -> response text; blank or null means unanswered"
    )
