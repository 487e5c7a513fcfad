"""Pydantic schemas for lender match results."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MatchedLender(BaseModel):
    """An eligible lender with its match score and the criteria it satisfied."""

    id: UUID
    name: str
    score: int = Field(..., ge=1)
    reasons: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class MatchResponse(BaseModel):
    """Ranked lender matches for an applicant profile."""

    matches: list[MatchedLender] = []
    total: int = 0


class LenderEvaluationResponse(BaseModel):
    """Full evaluation of one lender against an applicant profile."""

    lender_id: UUID
    lender_name: str
    eligible: bool
    score: int = Field(..., ge=0)
    reasons: list[str] = []
    disqualifications: list[str] = []
