"""Dependency injection for FastAPI endpoints."""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lendermatch.config import settings
from lendermatch.db.session import get_db
from lendermatch.repositories.lender_repository import LenderRepository
from lendermatch.services.lender_catalog import DatabaseLenderCatalog
from lendermatch.services.matching_service import MatchingService
from lendermatch.services.rule_engine.engine import RuleEngine
from lendermatch.services.rule_engine.matcher import Matcher
from lendermatch.services.rule_engine.scoring import ScoringWeights

__all__ = ["get_db", "get_session", "get_matcher", "get_matching_service"]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    This is an alias for get_db for clarity in endpoint signatures.
    """
    async for session in get_db():
        yield session


@lru_cache
def get_matcher() -> Matcher:
    """
    Shared matcher configured from settings.

    The matcher is stateless, so one instance serves every request.

    Raises:
        ValueError: If MATCH_WEIGHT_OVERRIDES names an unknown or negative weight
    """
    weights = ScoringWeights.from_overrides(settings.MATCH_WEIGHT_OVERRIDES)
    return Matcher(RuleEngine(weights))


def get_matching_service(
    db: Annotated[AsyncSession, Depends(get_session)],
    matcher: Annotated[Matcher, Depends(get_matcher)],
) -> MatchingService:
    """Matching service reading the lender catalog from the database."""
    return MatchingService(DatabaseLenderCatalog(LenderRepository(db)), matcher)
