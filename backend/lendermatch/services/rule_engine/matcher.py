"""Match aggregation: rank eligible lenders for an applicant."""

import logging
from typing import Iterable, List, Optional

from lendermatch.models.schemas.lender import LenderCriteria
from lendermatch.models.schemas.match import MatchedLender
from lendermatch.models.schemas.profile import ApplicantProfile
from lendermatch.services.rule_engine.base import EvaluationResult
from lendermatch.services.rule_engine.engine import RuleEngine

logger = logging.getLogger(__name__)


class Matcher:
    """
    Runs the rule engine over a lender catalog and ranks the survivors.

    A lender is surfaced only when it is eligible and at least one of its
    criteria was positively satisfied; a lender with a score of zero has no
    verified fit and is left out.
    """

    def __init__(self, rule_engine: Optional[RuleEngine] = None):
        """
        Initialize the matcher.

        Args:
            rule_engine: Engine to evaluate lenders with (default weights if omitted)
        """
        self.rule_engine = rule_engine or RuleEngine()

    def match(
        self,
        profile: ApplicantProfile,
        catalog: Optional[Iterable[LenderCriteria]],
    ) -> List[MatchedLender]:
        """
        Match an applicant profile against a catalog of lenders.

        Args:
            profile: The applicant profile
            catalog: Active, panel-eligible lender criteria (None if unavailable)

        Returns:
            Matched lenders sorted by score (descending); ties keep catalog order
        """
        if catalog is None:
            return []

        matches: List[MatchedLender] = []

        for criteria in catalog:
            result = self.rule_engine.evaluate(criteria, profile)

            if not result.eligible:
                logger.debug(
                    f"Lender {criteria.name} rejected: "
                    f"{'; '.join(result.disqualifications)}"
                )
                continue

            if result.score <= 0:
                logger.debug(f"Lender {criteria.name} has no satisfied criteria")
                continue

            matches.append(
                MatchedLender(
                    id=criteria.id,
                    name=criteria.name,
                    score=result.score,
                    reasons=list(result.reasons),
                )
            )

        # sorted() is stable, so equal scores stay in catalog order
        return sorted(matches, key=lambda m: m.score, reverse=True)

    def evaluate_lender(
        self,
        profile: ApplicantProfile,
        criteria: LenderCriteria,
    ) -> EvaluationResult:
        """
        Evaluate a single lender without filtering.

        Args:
            profile: The applicant profile
            criteria: The lender's underwriting criteria

        Returns:
            The full EvaluationResult, including disqualifications
        """
        return self.rule_engine.evaluate(criteria, profile)
