"""Pydantic schemas for API validation and serialization."""

from lendermatch.models.schemas.lender import LenderCriteria
from lendermatch.models.schemas.match import (
    LenderEvaluationResponse,
    MatchedLender,
    MatchResponse,
)
from lendermatch.models.schemas.profile import ApplicantProfile

__all__ = [
    "ApplicantProfile",
    "LenderCriteria",
    "LenderEvaluationResponse",
    "MatchedLender",
    "MatchResponse",
]
