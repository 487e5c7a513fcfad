"""Pydantic schema for the applicant profile collected during onboarding."""

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from lendermatch.core.enums import BusinessType, Industry, TradingTime, trading_months


def _answer(name: str, answer_key: str, **kwargs):
    """Field accepting both the snake_case name and the wizard's answer key."""
    return Field(None, validation_alias=AliasChoices(name, answer_key), **kwargs)


class ApplicantProfile(BaseModel):
    """
    Business and financial facts about a prospective borrower.

    Every field is optional. None means the fact is unknown, which is not
    the same as False or zero: an unknown fact leaves the corresponding
    lender criterion unevaluated.

    The onboarding wizard posts its answers with camelCase keys
    (``fundingNeeded``, ``ccjs``, ...); those keys are accepted alongside
    the field names. Other answers (names, phone, company number) are ignored.
    """

    trading_time: Optional[TradingTime] = _answer("trading_time", "tradingTime")
    monthly_revenue: Optional[Decimal] = _answer(
        "monthly_revenue", "monthlyRevenue", ge=0
    )
    funding_amount: Optional[Decimal] = _answer(
        "funding_amount", "fundingNeeded", ge=0
    )
    business_type: Optional[BusinessType] = _answer("business_type", "businessType")
    industry: Optional[Industry] = _answer("industry", "industry")
    has_filed_accounts: Optional[bool] = _answer("has_filed_accounts", "filedAccounts")
    has_ccjs: Optional[bool] = _answer("has_ccjs", "ccjs")
    ccj_value: Optional[Decimal] = _answer("ccj_value", "ccjValue", ge=0)
    directors_homeowners: Optional[bool] = _answer(
        "directors_homeowners", "directorsHomeowners"
    )
    card_payment_percentage: Optional[Decimal] = _answer(
        "card_payment_percentage", "cardPaymentPercentage", ge=0, le=100
    )
    has_existing_lending: Optional[bool] = _answer(
        "has_existing_lending", "existingLoans"
    )
    existing_lenders_count: Optional[int] = _answer(
        "existing_lenders_count", "existingLendersCount", ge=0
    )
    annual_profit: Optional[Decimal] = _answer("annual_profit", "annualProfit")
    net_assets: Optional[Decimal] = _answer("net_assets", "netAssets")

    model_config = ConfigDict(frozen=True)

    @property
    def trading_months(self) -> Optional[int]:
        """Months of trading implied by the trading time bucket."""
        return trading_months(self.trading_time)
