"""Pydantic models and constants for AIQ scoring."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Categories and levels
# =============================================================================

CATEGORIES = ("clarity", "depth", "efficiency", "creativity")

BASE_SCORE = 5

CATEGORY_MAX_SCORES = {
    "clarity": 25,
    "depth": 25,
    "efficiency": 25,
    "creativity": 25,
}


class AIQLevel(str, Enum):
    """Named tier derived from the composite score."""

    NOVICE = "AI Novice"
    BEGINNER = "AI Beginner"
    COMPETENT = "AI Competent"
    PROFICIENT = "AI Proficient"
    EXPERT = "AI Expert"


# Checked top-down, first match wins
LEVEL_THRESHOLDS: list[tuple[int, AIQLevel]] = [
    (90, AIQLevel.EXPERT),
    (75, AIQLevel.PROFICIENT),
    (60, AIQLevel.COMPETENT),
    (40, AIQLevel.BEGINNER),
]

MAX_COMPOSITE_SCORE = 100


# =============================================================================
# Scoring Types
# =============================================================================


class CategoryScoreBreakdown(BaseModel):
    """The four category scores for one response or an averaged session."""

    model_config = ConfigDict(frozen=True)

    clarity: int = Field(..., ge=0, le=25, description="Clarity score (0-25)")
    depth: int = Field(..., ge=0, le=25, description="Depth score (0-25)")
    efficiency: int = Field(..., ge=0, le=25, description="Efficiency score (0-25)")
    creativity: int = Field(..., ge=0, le=25, description="Creativity score (0-25)")

    def total(self) -> int:
        return self.clarity + self.depth + self.efficiency + self.creativity


class CategoryScore(BaseModel):
    """Score for one category plus the rules that awarded a bonus."""

    score: int = Field(..., ge=0, le=25, description="Category score (0-25)")
    signals: list[str] = Field(
        default_factory=list, description="Ids of the rules that added points"
    )


class CompositeScore(BaseModel):
    """Composite percentage and the level it maps to."""

    score: int = Field(..., ge=0, le=100, description="Composite score (0-100)")
    level: AIQLevel = Field(..., description="Tier for this score")


class CompositeResult(BaseModel):
    """Final result of a completed assessment session.

    This is the record the result store keeps. It is never mutated; a new
    completed session replaces it wholesale.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(..., ge=0, le=100, description="Composite score (0-100)")
    level: AIQLevel = Field(..., description="Tier for this score")
    breakdown: CategoryScoreBreakdown = Field(
        ..., description="Category scores averaged over answered questions"
    )
    certificate_code: str = Field(
        ...,
        alias="certificateCode",
        pattern=r"^AIQ-[A-Z0-9]{8}$",
        description="Lookup token for later verification",
    )
    timestamp: datetime = Field(..., description="When the session was completed (UTC)")
    answered_questions: int = Field(
        default=0,
        ge=0,
        alias="answeredQuestions",
        description="Number of non-empty responses that were scored",
    )


class VerificationStatus(str, Enum):
    VERIFIED = "Verified"
    NOT_FOUND = "Certificate not found"
    INVALID_FORMAT = "Invalid certificate format"


class VerificationResult(BaseModel):
    """Outcome of checking a certificate code against the stored result."""

    valid: bool = Field(..., description="Whether the code matches the stored result")
    score: int | None = Field(None, description="Stored score, only when valid")
    level: AIQLevel | None = Field(None, description="Stored level, only when valid")
    date: str | None = Field(None, description="ISO date of the stored result, only when valid")
    status: VerificationStatus = Field(..., description="Human-readable outcome")
