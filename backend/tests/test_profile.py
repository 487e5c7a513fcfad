from decimal import Decimal

import pytest
from pydantic import ValidationError

from lendermatch.core.enums import BusinessType, TradingTime, trading_months
from lendermatch.models.schemas.profile import ApplicantProfile


def test_parses_wizard_answers():
    profile = ApplicantProfile.model_validate(
        {
            "tradingTime": "12-24",
            "monthlyRevenue": "15000",
            "fundingNeeded": 40000,
            "businessType": "sole_trader",
            "industry": "hospitality",
            "filedAccounts": False,
            "ccjs": True,
            "ccjValue": 750,
            "directorsHomeowners": True,
            "cardPaymentPercentage": 80,
            "existingLoans": True,
            "existingLendersCount": 2,
            "annualProfit": -5000,
            "netAssets": 0,
            "firstName": "Sam",
            "companyNumber": "01234567",
        }
    )

    assert profile.trading_time is TradingTime.ONE_TO_2_YEARS
    assert profile.trading_months == 18
    assert profile.monthly_revenue == Decimal("15000")
    assert profile.funding_amount == Decimal("40000")
    assert profile.business_type is BusinessType.SOLE_TRADER
    assert profile.has_ccjs is True
    assert profile.has_filed_accounts is False
    assert profile.existing_lenders_count == 2
    assert profile.annual_profit == Decimal("-5000")


def test_snake_case_names_accepted():
    profile = ApplicantProfile(funding_amount=1000, has_ccjs=False)

    assert profile.funding_amount == Decimal("1000")
    assert profile.has_ccjs is False


def test_missing_answers_are_unknown():
    profile = ApplicantProfile.model_validate({})

    assert profile.trading_time is None
    assert profile.trading_months is None
    assert profile.has_ccjs is None


@pytest.mark.parametrize(
    "bucket,months",
    [("0-3", 1), ("3-6", 4), ("6-12", 9), ("12-24", 18), ("24+", 30)],
)
def test_trading_months(bucket, months):
    assert trading_months(TradingTime(bucket)) == months
    assert TradingTime(bucket).months == months


def test_unknown_trading_time_has_no_months():
    assert trading_months(None) is None


@pytest.mark.parametrize(
    "answers",
    [
        {"cardPaymentPercentage": 150},
        {"monthlyRevenue": -1},
        {"existingLendersCount": -2},
        {"tradingTime": "forever"},
        {"businessType": "charity"},
    ],
)
def test_rejects_invalid_answers(answers):
    with pytest.raises(ValidationError):
        ApplicantProfile.model_validate(answers)


def test_profile_is_immutable():
    profile = ApplicantProfile(has_ccjs=False)

    with pytest.raises(ValidationError):
        profile.has_ccjs = True
