"""Criterion evaluators for lender underwriting checks."""

from .business_evaluator import (
    BusinessTypeEvaluator,
    IndustryEvaluator,
    MonthlyRevenueEvaluator,
    TradingTimeEvaluator,
)
from .credit_evaluator import (
    CCJEvaluator,
    ExistingLendingEvaluator,
    FiledAccountsEvaluator,
    HomeownerEvaluator,
)
from .financial_evaluator import (
    CardPaymentsEvaluator,
    NetAssetsEvaluator,
    ProfitabilityEvaluator,
)
from .loan_evaluator import LoanRangeEvaluator, RevenueMultipleEvaluator

__all__ = [
    "BusinessTypeEvaluator",
    "CardPaymentsEvaluator",
    "CCJEvaluator",
    "ExistingLendingEvaluator",
    "FiledAccountsEvaluator",
    "HomeownerEvaluator",
    "IndustryEvaluator",
    "LoanRangeEvaluator",
    "MonthlyRevenueEvaluator",
    "NetAssetsEvaluator",
    "ProfitabilityEvaluator",
    "RevenueMultipleEvaluator",
    "TradingTimeEvaluator",
]
