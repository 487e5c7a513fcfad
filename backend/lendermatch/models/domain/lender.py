"""Lender domain model mirroring the portal's lenders table."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from lendermatch.core.enums import LenderStatus
from lendermatch.db.base import BaseModel


class Lender(BaseModel):
    """Lender with the underwriting thresholds used for panel matching."""

    __tablename__ = "lenders"

    # Basic Information
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=LenderStatus.ACTIVE.value, index=True
    )
    is_eligible_panel: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Trading & Revenue
    min_trading_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    min_monthly_revenue: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )
    max_monthly_revenue_multiple: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(8, 2), nullable=True
    )

    # Loan Size
    absolute_min_loan: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )
    absolute_max_loan: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )

    # Business Profile
    accepted_business_types: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String(50)), nullable=True
    )  # e.g., ["limited_company", "llp"]
    prohibited_industries: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String(100)), nullable=True
    )  # e.g., ["construction"]

    # Accounts & Credit History
    requires_filed_accounts: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    min_filed_accounts_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    accepts_ccjs: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    max_ccj_value: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )
    requires_homeowner: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    # Card Takings
    requires_card_payments: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    min_card_payment_percentage: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 2), nullable=True
    )

    # Existing Borrowing
    requires_existing_lending: Mapped[Optional[bool]] = mapped_column(
        Boolean, nullable=True
    )
    max_existing_lenders: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Profitability & Balance Sheet
    requires_profitable: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    min_profit_margin_percentage: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 2), nullable=True
    )
    requires_positive_net_assets: Mapped[Optional[bool]] = mapped_column(
        Boolean, nullable=True
    )
    min_net_assets_ratio: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(8, 2), nullable=True
    )

    def __repr__(self) -> str:
        return (
            f"<Lender(id={self.id}, name={self.name!r}, status={self.status!r}, "
            f"panel={self.is_eligible_panel})>"
        )
