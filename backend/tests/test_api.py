"""HTTP tests for the matching and health endpoints."""

import uuid

import pytest
from fastapi.testclient import TestClient

from lendermatch.config import settings
from lendermatch.deps import get_db, get_matching_service
from lendermatch.main import app
from lendermatch.services.matching_service import MatchingService

WIZARD_ANSWERS = {
    "tradingTime": "24+",
    "monthlyRevenue": 20000,
    "fundingNeeded": 50000,
    "businessType": "limited_company",
    "industry": "retail",
    "filedAccounts": True,
    "ccjs": False,
    "directorsHomeowners": True,
    "cardPaymentPercentage": 50,
    "existingLoans": True,
    "existingLendersCount": 1,
    "annualProfit": 30000,
    "netAssets": 10000,
    "email": "owner@example.com",
}


class FakeSession:
    def __init__(self, error=None):
        self.error = error

    async def execute(self, statement):
        if self.error is not None:
            raise self.error


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_catalog(make_catalog):
    def _use(lenders, error=None):
        catalog = make_catalog(lenders, error=error)
        app.dependency_overrides[get_matching_service] = lambda: MatchingService(catalog)

    return _use


def test_match_lenders(client, use_catalog, make_lender, full_criteria):
    strong = make_lender("Strong", **full_criteria)
    weak = make_lender("Weak", min_trading_months=6)
    use_catalog([weak, make_lender("Closed", accepts_ccjs=False, min_trading_months=60), strong])

    response = client.post("/api/v1/matching/lenders", json=WIZARD_ANSWERS)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [m["id"] for m in body["matches"]] == [str(strong.id), str(weak.id)]
    assert body["matches"][0]["score"] == 120
    assert body["matches"][1]["reasons"] == ["Meets minimum trading time requirement"]


def test_match_lenders_with_empty_profile(client, use_catalog, make_lender, full_criteria):
    use_catalog([make_lender(**full_criteria)])

    response = client.post("/api/v1/matching/lenders", json={})

    assert response.status_code == 200
    assert response.json() == {"matches": [], "total": 0}


def test_match_lenders_catalog_unavailable(client, use_catalog):
    use_catalog([], error=ConnectionError("database is down"))

    response = client.post("/api/v1/matching/lenders", json=WIZARD_ANSWERS)

    assert response.status_code == 200
    assert response.json() == {"matches": [], "total": 0}


def test_match_lenders_rejects_invalid_profile(client, use_catalog):
    use_catalog([])

    response = client.post(
        "/api/v1/matching/lenders", json={**WIZARD_ANSWERS, "cardPaymentPercentage": 150}
    )

    assert response.status_code == 422


def test_evaluate_lender(client, use_catalog, make_lender):
    lender = make_lender("Picky", min_monthly_revenue=50000, requires_homeowner=True)
    use_catalog([lender])

    response = client.post(
        f"/api/v1/matching/lenders/{lender.id}/evaluate", json=WIZARD_ANSWERS
    )

    assert response.status_code == 200
    body = response.json()
    assert body["lender_id"] == str(lender.id)
    assert body["lender_name"] == "Picky"
    assert body["eligible"] is False
    assert body["score"] == 10
    assert body["reasons"] == ["Director is homeowner"]
    assert len(body["disqualifications"]) == 1


def test_evaluate_unknown_lender(client, use_catalog):
    use_catalog([])
    lender_id = uuid.uuid4()

    response = client.post(f"/api/v1/matching/lenders/{lender_id}/evaluate", json={})

    assert response.status_code == 404
    assert response.json()["detail"] == f"Panel lender with ID {lender_id} not found"


def test_evaluate_lender_catalog_unavailable(client, use_catalog):
    use_catalog([], error=ConnectionError("database is down"))

    response = client.post(f"/api/v1/matching/lenders/{uuid.uuid4()}/evaluate", json={})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to evaluate lender"


def test_health(client):
    async def healthy_db():
        yield FakeSession()

    app.dependency_overrides[get_db] = healthy_db

    response = client.get("/api/v1/health")

    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "healthy"
    assert body["environment"] == settings.ENVIRONMENT


def test_health_degraded_when_database_unreachable(client):
    async def broken_db():
        yield FakeSession(error=ConnectionError("connection refused"))

    app.dependency_overrides[get_db] = broken_db

    response = client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["database"] == "unhealthy: connection refused"
