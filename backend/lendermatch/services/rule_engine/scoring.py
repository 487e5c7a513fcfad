"""Scoring weights for lender criteria."""

from dataclasses import dataclass, fields, replace
from typing import Mapping


@dataclass(frozen=True)
class ScoringWeights:
    """
    Points awarded for each satisfied lender criterion.

    Defaults reproduce the portal's reference scoring. The relative order of
    the weights is what ranks lenders, so overrides should keep it in mind.
    """

    trading_time: int = 10
    monthly_revenue: int = 10
    revenue_multiple: int = 10
    loan_range: int = 10
    business_type: int = 10
    industry: int = 5
    filed_accounts: int = 10
    no_ccjs: int = 10
    ccj_within_limit: int = 5
    homeowner: int = 10
    card_payments: int = 10
    existing_lenders: int = 5
    profitable: int = 10
    net_assets: int = 10

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, int]) -> "ScoringWeights":
        """
        Build weights from the defaults with selected values replaced.

        Args:
            overrides: Mapping of weight name to points, e.g. {"industry": 10}

        Returns:
            ScoringWeights with the overrides applied

        Raises:
            ValueError: If a name is unknown or a weight is negative
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown scoring weight(s): {', '.join(unknown)}")

        negative = sorted(name for name, value in overrides.items() if value < 0)
        if negative:
            raise ValueError(f"Scoring weights cannot be negative: {', '.join(negative)}")

        return replace(cls(), **dict(overrides))
