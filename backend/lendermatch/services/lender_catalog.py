"""Lender catalog readers supplying criteria to the matching engine."""

import logging
from typing import Any, List, Optional, Protocol
from uuid import UUID

from pydantic import ValidationError

from lendermatch.models.schemas.lender import LenderCriteria
from lendermatch.repositories.lender_repository import LenderRepository

logger = logging.getLogger(__name__)


class LenderCatalogReader(Protocol):
    """Read interface over the active, panel-eligible lender catalog."""

    async def list_panel_lenders(self) -> List[LenderCriteria]:
        ...

    async def get_panel_lender(self, lender_id: UUID) -> Optional[LenderCriteria]:
        ...


class DatabaseLenderCatalog:
    """
    Lender catalog backed by the portal's lenders table.

    Each row is validated into LenderCriteria. A row that fails validation
    (for example a non-numeric threshold) is logged and left out of the
    catalog: its constraints cannot be read, so the lender is not shown
    rather than shown without them. Other lenders are unaffected.
    """

    def __init__(self, repository: LenderRepository):
        """
        Initialize the catalog.

        Args:
            repository: Lender repository bound to a database session
        """
        self.repository = repository

    async def list_panel_lenders(self) -> List[LenderCriteria]:
        """
        Load criteria for all active, panel-eligible lenders.

        Returns:
            Lender criteria in catalog order, without malformed records
        """
        lenders = await self.repository.get_panel_lenders()
        catalog = [
            criteria
            for criteria in (self._to_criteria(lender) for lender in lenders)
            if criteria is not None
        ]

        skipped = len(lenders) - len(catalog)
        if skipped:
            logger.warning(f"Skipped {skipped} malformed lender record(s)")

        return catalog

    async def get_panel_lender(self, lender_id: UUID) -> Optional[LenderCriteria]:
        """
        Load criteria for one panel lender.

        Args:
            lender_id: UUID of the lender

        Returns:
            Lender criteria, or None if not on the panel or malformed
        """
        lender = await self.repository.get_panel_lender(lender_id)
        if lender is None:
            return None
        return self._to_criteria(lender)

    @staticmethod
    def _to_criteria(lender: Any) -> Optional[LenderCriteria]:
        try:
            return LenderCriteria.model_validate(lender)
        except ValidationError as e:
            logger.warning(
                f"Lender record {getattr(lender, 'id', None)} is malformed "
                f"and was excluded: {e.error_count()} validation error(s)"
            )
            return None
