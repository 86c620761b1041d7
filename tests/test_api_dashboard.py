"""Tests for dashboard API endpoints."""

import pytest
from datetime import date

from luca.schemas.category import Category, Source
from luca.services.persistence_service import save_upload
from tests.conftest import make_txn


@pytest.fixture
def imported(db_session, sample_transactions):
    save_upload(db_session, "local", "sample.csv", Source.caixabank, sample_transactions)


class TestDashboardAPI:
    """Test dashboard endpoints."""

    def test_summary_empty(self, client):
        """Should return zeros with no data."""
        response = client.get("/api/v1/dashboard/summary")
        assert response.status_code == 200
        data = response.json()
        assert data["total_income"] == 0
        assert data["total_expenses"] == 0
        assert data["month_count"] == 1
        assert data["top_expense_category"] == "N/A"

    def test_summary(self, client, imported):
        data = client.get("/api/v1/dashboard/summary").json()
        assert data["total_income"] == pytest.approx(2015.0)
        assert data["total_expenses"] == pytest.approx(169.99)
        assert data["month_count"] == 2
        assert data["top_expense_category"] == "Supermercado"
        assert data["transaction_count"] == 6

    def test_monthly(self, client, imported):
        data = client.get("/api/v1/dashboard/monthly").json()
        assert [m["month"] for m in data] == ["2025-02", "2025-03"]
        assert data[0]["label"] == "Feb 2025"
        assert data[0]["by_category"]["supermarket"] == pytest.approx(80.0)

    def test_categories(self, client, imported):
        data = client.get("/api/v1/dashboard/categories").json()
        assert data[0]["category"] == "supermarket"
        assert data[0]["total"] == pytest.approx(140.0)

    def test_categories_income(self, client, imported):
        data = client.get("/api/v1/dashboard/categories", params={"type": "income"}).json()
        assert [c["category"] for c in data] == ["income", "transfers"]

    def test_categories_bad_type(self, client):
        response = client.get("/api/v1/dashboard/categories", params={"type": "savings"})
        assert response.status_code == 422

    def test_recent_transactions(self, client, imported):
        data = client.get("/api/v1/dashboard/recent-transactions", params={"limit": 3}).json()
        assert [t["date"] for t in data] == ["2025-03-06", "2025-03-05", "2025-03-03"]

    def test_other_user_sees_nothing(self, client, imported):
        data = client.get("/api/v1/dashboard/summary", headers={"X-User-Id": "someone-else"}).json()
        assert data["transaction_count"] == 0

    def test_top_expenses(self, client, imported):
        data = client.get("/api/v1/dashboard/top-expenses", params={"limit": 2}).json()
        assert [t["amount"] for t in data] == ["-80.00", "-60.00"]

    def test_top_expenses_limit_bounds(self, client):
        response = client.get("/api/v1/dashboard/top-expenses", params={"limit": 0})
        assert response.status_code == 422

    def test_subscriptions(self, client, db_session):
        charges = [
            make_txn("Spotify", "-17.99", date(2025, 2, 5), Category.subscriptions, Source.revolut),
            make_txn("Spotify", "-17.99", date(2025, 3, 5), Category.subscriptions, Source.revolut),
            make_txn("Netflix", "-12.99", date(2025, 3, 1), Category.subscriptions, Source.revolut),
        ]
        save_upload(db_session, "local", "revolut.csv", Source.revolut, charges)

        [spotify] = client.get("/api/v1/dashboard/subscriptions").json()
        assert spotify["name"] == "Spotify Premium"
        assert spotify["occurrences"] == 2
        assert spotify["last_charge"] == "2025-03-05"
        assert spotify["amount"] == pytest.approx(17.99)
