"""Tests for the database-backed lender catalog."""

import asyncio
import logging
import uuid
from decimal import Decimal
from types import SimpleNamespace

from lendermatch.services.lender_catalog import DatabaseLenderCatalog


class FakeLenderRepository:
    def __init__(self, rows):
        self.rows = rows

    async def get_panel_lenders(self):
        return list(self.rows)

    async def get_panel_lender(self, lender_id):
        return next((row for row in self.rows if row.id == lender_id), None)


def _row(name, **columns):
    return SimpleNamespace(id=uuid.uuid4(), name=name, **columns)


def test_rows_become_criteria_in_order():
    rows = [
        _row("Bravo", min_monthly_revenue=Decimal("5000"), accepted_business_types=["llp"]),
        _row("Alpha", requires_homeowner=True),
    ]
    catalog = DatabaseLenderCatalog(FakeLenderRepository(rows))

    lenders = asyncio.run(catalog.list_panel_lenders())

    assert [lender.name for lender in lenders] == ["Bravo", "Alpha"]
    assert lenders[0].min_monthly_revenue == Decimal("5000")
    assert lenders[0].accepted_business_types == ["llp"]
    assert lenders[1].requires_homeowner is True
    assert lenders[1].min_trading_months is None


def test_malformed_row_is_excluded(caplog):
    good = _row("Good", min_trading_months=6)
    bad = _row("Bad", min_monthly_revenue="lots")
    catalog = DatabaseLenderCatalog(FakeLenderRepository([bad, good]))

    with caplog.at_level(logging.WARNING, logger="lendermatch.services.lender_catalog"):
        lenders = asyncio.run(catalog.list_panel_lenders())

    assert [lender.id for lender in lenders] == [good.id]
    assert f"Lender record {bad.id} is malformed" in caplog.text
    assert "Skipped 1 malformed lender record(s)" in caplog.text


def test_get_panel_lender():
    row = _row("Only", max_existing_lenders=2)
    catalog = DatabaseLenderCatalog(FakeLenderRepository([row]))

    lender = asyncio.run(catalog.get_panel_lender(row.id))

    assert lender.id == row.id
    assert lender.max_existing_lenders == 2


def test_get_panel_lender_not_found():
    catalog = DatabaseLenderCatalog(FakeLenderRepository([]))

    assert asyncio.run(catalog.get_panel_lender(uuid.uuid4())) is None


def test_get_malformed_panel_lender_is_none():
    row = _row("Broken", max_existing_lenders=-1)
    catalog = DatabaseLenderCatalog(FakeLenderRepository([row]))

    assert asyncio.run(catalog.get_panel_lender(row.id)) is None
