"""Rule engine orchestrator for evaluating one lender's criteria."""

import logging
from functools import reduce
from typing import List, Optional

from lendermatch.models.schemas.lender import LenderCriteria
from lendermatch.models.schemas.profile import ApplicantProfile
from lendermatch.services.rule_engine.base import (
    CriterionOutcome,
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from lendermatch.services.rule_engine.evaluators import (
    BusinessTypeEvaluator,
    CardPaymentsEvaluator,
    CCJEvaluator,
    ExistingLendingEvaluator,
    FiledAccountsEvaluator,
    HomeownerEvaluator,
    IndustryEvaluator,
    LoanRangeEvaluator,
    MonthlyRevenueEvaluator,
    NetAssetsEvaluator,
    ProfitabilityEvaluator,
    RevenueMultipleEvaluator,
    TradingTimeEvaluator,
)
from lendermatch.services.rule_engine.scoring import ScoringWeights

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Rule engine orchestrator for lender criteria.

    This class:
    - Maintains an ordered registry of criterion evaluators
    - Folds every evaluator's outcome into one EvaluationResult
    - Applies the configured scoring weights

    The engine holds no per-request state and is safe to share between
    concurrent requests.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        """
        Initialize the rule engine with the default evaluators.

        Args:
            weights: Scoring weights (defaults to the reference weights)
        """
        self.weights = weights or ScoringWeights()
        self._evaluators: List[RuleEvaluator] = []
        self._register_default_evaluators()

    def _register_default_evaluators(self) -> None:
        """Register the built-in evaluators in evaluation order."""
        # Reasons are reported in this order
        self._evaluators.extend(
            [
                TradingTimeEvaluator(),
                MonthlyRevenueEvaluator(),
                RevenueMultipleEvaluator(),
                LoanRangeEvaluator(),
                BusinessTypeEvaluator(),
                IndustryEvaluator(),
                FiledAccountsEvaluator(),
                CCJEvaluator(),
                HomeownerEvaluator(),
                CardPaymentsEvaluator(),
                ExistingLendingEvaluator(),
                ProfitabilityEvaluator(),
                NetAssetsEvaluator(),
            ]
        )

    def register_evaluator(self, evaluator: RuleEvaluator) -> None:
        """
        Register an additional evaluator, run after those already registered.

        Args:
            evaluator: The evaluator instance
        """
        self._evaluators.append(evaluator)

    @property
    def evaluators(self) -> tuple[RuleEvaluator, ...]:
        """Registered evaluators in evaluation order."""
        return tuple(self._evaluators)

    def evaluate(
        self,
        criteria: LenderCriteria,
        profile: ApplicantProfile,
    ) -> EvaluationResult:
        """
        Evaluate every criterion of a lender against an applicant profile.

        Args:
            criteria: The lender's underwriting criteria
            profile: The applicant profile

        Returns:
            EvaluationResult with eligibility, score, and reasons
        """
        context = EvaluationContext(
            profile=profile,
            criteria=criteria,
            weights=self.weights,
        )
        return reduce(
            lambda result, evaluator: result.combine(self._run(evaluator, context)),
            self._evaluators,
            EvaluationResult(),
        )

    def _run(
        self, evaluator: RuleEvaluator, context: EvaluationContext
    ) -> CriterionOutcome:
        """Run one evaluator, treating an evaluation error as a failed gate."""
        try:
            return evaluator.evaluate(context)
        except Exception as e:
            logger.warning(
                f"Evaluator {evaluator.name} failed for lender "
                f"{context.criteria.id}: {str(e)}",
                exc_info=True,
            )
            return CriterionOutcome.disqualify(f"Evaluation error: {str(e)}")
