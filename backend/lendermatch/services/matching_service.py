"""Matching service for ranking panel lenders against an applicant."""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from lendermatch.models.schemas.lender import LenderCriteria
from lendermatch.models.schemas.match import MatchedLender
from lendermatch.models.schemas.profile import ApplicantProfile
from lendermatch.services.lender_catalog import LenderCatalogReader
from lendermatch.services.rule_engine.base import EvaluationResult
from lendermatch.services.rule_engine.matcher import Matcher

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Matching service to orchestrate the lender matching process.

    This service:
    - Fetches the panel lender catalog through a catalog reader
    - Runs the matcher over the catalog snapshot
    - Turns catalog failures into an empty match list, logging the failure
    """

    def __init__(self, catalog: LenderCatalogReader, matcher: Optional[Matcher] = None):
        """
        Initialize the matching service.

        Args:
            catalog: Source of panel lender criteria
            matcher: Matcher to rank lenders with (default weights if omitted)
        """
        self.catalog = catalog
        self.matcher = matcher or Matcher()

    async def find_matches(self, profile: ApplicantProfile) -> List[MatchedLender]:
        """
        Rank the panel lenders an applicant is eligible to be introduced to.

        A catalog that cannot be read yields no matches rather than an
        error. Callers cannot tell this apart from "no eligible lenders";
        the failure is only visible in the logs.

        Args:
            profile: The applicant profile

        Returns:
            Matched lenders sorted by score (descending)
        """
        try:
            lenders = await self.catalog.list_panel_lenders()
        except Exception as e:
            logger.error(
                f"Lender catalog unavailable, returning no matches: {str(e)}",
                exc_info=True,
            )
            return []

        matches = self.matcher.match(profile, lenders)

        logger.info(f"Matched {len(matches)} of {len(lenders)} panel lenders")

        return matches

    async def evaluate_lender(
        self,
        lender_id: UUID,
        profile: ApplicantProfile,
    ) -> Optional[Tuple[LenderCriteria, EvaluationResult]]:
        """
        Evaluate one panel lender in full, for audit.

        Unlike find_matches, catalog errors propagate to the caller.

        Args:
            lender_id: UUID of the lender
            profile: The applicant profile

        Returns:
            The lender's criteria and evaluation, or None if not on the panel
        """
        criteria = await self.catalog.get_panel_lender(lender_id)
        if criteria is None:
            return None

        return criteria, self.matcher.evaluate_lender(profile, criteria)
