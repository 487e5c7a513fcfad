"""Rule engine for matching applicant profiles against lender criteria."""

from .base import (
    CriterionOutcome,
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from .engine import RuleEngine
from .matcher import Matcher
from .scoring import ScoringWeights

__all__ = [
    "CriterionOutcome",
    "EvaluationContext",
    "EvaluationResult",
    "Matcher",
    "RuleEngine",
    "RuleEvaluator",
    "ScoringWeights",
]
