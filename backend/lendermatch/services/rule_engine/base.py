"""Rule engine foundation with evaluation context, outcomes, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from lendermatch.models.schemas.lender import LenderCriteria
from lendermatch.models.schemas.profile import ApplicantProfile
from lendermatch.services.rule_engine.scoring import ScoringWeights


@dataclass(frozen=True)
class EvaluationContext:
    """
    Everything a rule evaluator needs to check one lender criterion.

    Attributes:
        profile: The applicant profile being matched
        criteria: The lender's underwriting criteria
        weights: Points awarded per satisfied criterion
    """

    profile: ApplicantProfile
    criteria: LenderCriteria
    weights: ScoringWeights = field(default_factory=ScoringWeights)


@dataclass(frozen=True)
class CriterionOutcome:
    """
    Result of a single criterion check.

    A check either does nothing (skipped), awards points with a reason, or
    disqualifies the lender with an explanation.
    """

    score: int = 0
    reason: Optional[str] = None
    disqualification: Optional[str] = None

    @property
    def disqualified(self) -> bool:
        return self.disqualification is not None

    @classmethod
    def skip(cls) -> "CriterionOutcome":
        return cls()

    @classmethod
    def award(cls, weight: int, reason: str) -> "CriterionOutcome":
        return cls(score=weight, reason=reason)

    @classmethod
    def disqualify(cls, explanation: str) -> "CriterionOutcome":
        return cls(disqualification=explanation)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Accumulated result of evaluating every criterion for one lender.

    Attributes:
        eligible: False as soon as any hard gate fails
        score: Sum of the weights of satisfied criteria
        reasons: Satisfied criteria, in evaluation order
        disqualifications: Failed hard gates, in evaluation order
    """

    eligible: bool = True
    score: int = 0
    reasons: tuple[str, ...] = ()
    disqualifications: tuple[str, ...] = ()

    def combine(self, outcome: CriterionOutcome) -> "EvaluationResult":
        """Fold one criterion outcome into this result."""
        if outcome.disqualified:
            return EvaluationResult(
                eligible=False,
                score=self.score,
                reasons=self.reasons,
                disqualifications=self.disqualifications + (outcome.disqualification,),
            )
        if outcome.reason is None:
            return self
        return EvaluationResult(
            eligible=self.eligible,
            score=self.score + outcome.score,
            reasons=self.reasons + (outcome.reason,),
            disqualifications=self.disqualifications,
        )


class RuleEvaluator(ABC):
    """
    Abstract base class for criterion evaluators using the Strategy pattern.

    Each concrete evaluator checks one lender criterion. An evaluator must
    return a skipped outcome when the lender imposes no constraint or the
    applicant fact it needs is unknown, unless the criterion explicitly
    treats an unknown fact as a failure.
    """

    name: str = "criterion"

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> CriterionOutcome:
        """
        Evaluate the criterion against the provided context.

        Args:
            context: EvaluationContext with profile, criteria and weights

        Returns:
            CriterionOutcome that is skipped, awarded, or disqualifying
        """
        pass
