"""Pydantic schema for lender underwriting criteria."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LenderCriteria(BaseModel):
    """
    Underwriting thresholds and flags for one panel lender.

    Any attribute left as None means the lender imposes no constraint on
    that dimension. Empty accepted/prohibited lists mean the same.
    """

    id: UUID
    name: str = Field(..., min_length=1, max_length=255)

    # Scalar minimums / maximums
    min_trading_months: Optional[int] = Field(None, ge=0)
    min_monthly_revenue: Optional[Decimal] = Field(None, ge=0)
    max_monthly_revenue_multiple: Optional[Decimal] = Field(None, ge=0)
    absolute_min_loan: Optional[Decimal] = Field(None, ge=0)
    absolute_max_loan: Optional[Decimal] = Field(None, ge=0)
    min_filed_accounts_years: Optional[int] = Field(None, ge=0)
    max_ccj_value: Optional[Decimal] = Field(None, ge=0)
    min_card_payment_percentage: Optional[Decimal] = Field(None, ge=0, le=100)
    max_existing_lenders: Optional[int] = Field(None, ge=0)
    min_profit_margin_percentage: Optional[Decimal] = None
    min_net_assets_ratio: Optional[Decimal] = None

    # Boolean requirements
    requires_filed_accounts: Optional[bool] = None
    accepts_ccjs: Optional[bool] = None
    requires_homeowner: Optional[bool] = None
    requires_card_payments: Optional[bool] = None
    requires_existing_lending: Optional[bool] = None
    requires_profitable: Optional[bool] = None
    requires_positive_net_assets: Optional[bool] = None

    # Set membership
    accepted_business_types: Optional[list[str]] = Field(
        None, description="Allowed business types (e.g., ['limited_company', 'llp'])"
    )
    prohibited_industries: Optional[list[str]] = Field(
        None, description="Excluded industries (e.g., ['construction'])"
    )

    model_config = ConfigDict(from_attributes=True, frozen=True)
