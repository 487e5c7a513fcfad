"""Repository for reading the panel lender catalog."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lendermatch.core.enums import LenderStatus
from lendermatch.models.domain.lender import Lender
from lendermatch.repositories.base import BaseRepository


class LenderRepository(BaseRepository[Lender]):
    """
    Repository for Lender with catalog queries for the matching engine.

    Panel lenders are those that are active and flagged as eligible for
    automated matching.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the lender repository.

        Args:
            db: Async database session
        """
        super().__init__(Lender, db)

    async def get_panel_lenders(self) -> List[Lender]:
        """
        Retrieve all active, panel-eligible lenders.

        Ordered by name, then id, so that equal-score matches rank the
        same way on every run.

        Returns:
            List of panel lenders
        """
        return await self.find_by(
            order_by=(Lender.name, Lender.id),
            status=LenderStatus.ACTIVE.value,
            is_eligible_panel=True,
        )

    async def get_panel_lender(self, id: UUID) -> Optional[Lender]:
        """
        Retrieve a lender by ID if it is an active panel lender.

        Args:
            id: The UUID of the lender

        Returns:
            The lender, or None if not found or not on the panel
        """
        lender = await self.get_by_id(id)
        if lender is None:
            return None
        if lender.status != LenderStatus.ACTIVE.value or not lender.is_eligible_panel:
            return None
        return lender
