"""Domain models for the application."""

from lendermatch.models.domain.lender import Lender

__all__ = ["Lender"]
