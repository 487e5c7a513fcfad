"""Core enums for type safety across the application."""

from enum import Enum
from typing import Optional


class TradingTime(str, Enum):
    """Trading time buckets offered by the onboarding questionnaire."""

    UP_TO_3_MONTHS = "0-3"
    THREE_TO_6_MONTHS = "3-6"
    SIX_TO_12_MONTHS = "6-12"
    ONE_TO_2_YEARS = "12-24"
    OVER_2_YEARS = "24+"

    @property
    def months(self) -> int:
        """Representative number of months for the bucket."""
        return _TRADING_MONTHS[self]


_TRADING_MONTHS = {
    TradingTime.UP_TO_3_MONTHS: 1,
    TradingTime.THREE_TO_6_MONTHS: 4,
    TradingTime.SIX_TO_12_MONTHS: 9,
    TradingTime.ONE_TO_2_YEARS: 18,
    TradingTime.OVER_2_YEARS: 30,
}


class BusinessType(str, Enum):
    """Business legal structure types."""

    SOLE_TRADER = "sole_trader"
    PARTNERSHIP = "partnership"
    LIMITED_COMPANY = "limited_company"
    LLP = "llp"
    OTHER = "other"


class Industry(str, Enum):
    """Industry sectors."""

    RETAIL = "retail"
    HOSPITALITY = "hospitality"
    CONSTRUCTION = "construction"
    PROFESSIONAL_SERVICES = "professional_services"
    TECHNOLOGY = "technology"
    MANUFACTURING = "manufacturing"
    HEALTHCARE = "healthcare"
    TRANSPORT = "transport"
    OTHER = "other"


class LenderStatus(str, Enum):
    """Lender lifecycle states."""

    ACTIVE = "active"
    INACTIVE = "inactive"


def trading_months(trading_time: Optional[TradingTime]) -> Optional[int]:
    """Convert a trading time bucket to months, keeping unknown as None."""
    if trading_time is None:
        return None
    return trading_time.months
