"""Service layer for business logic."""

from lendermatch.services.lender_catalog import DatabaseLenderCatalog, LenderCatalogReader
from lendermatch.services.matching_service import MatchingService

__all__ = ["DatabaseLenderCatalog", "LenderCatalogReader", "MatchingService"]
