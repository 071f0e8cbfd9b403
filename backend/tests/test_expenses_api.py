from datetime import date

from fastapi.testclient import TestClient

from expense_dashboard.clock import today
from expense_dashboard.main import app


def _fixed_today() -> date:
    return date(2024, 3, 15)


def test_list_returns_seeded_expenses_newest_first() -> None:
    with TestClient(app) as client:
        response = client.get("/api/expenses")

    assert response.status_code == 200
    payload = response.json()
    assert [item["id"] for item in payload] == [4, 3, 2, 1]
    assert {"id", "title", "amount", "category", "date", "notes"} <= set(payload[0])


def test_get_missing_expense_returns_message() -> None:
    with TestClient(app) as client:
        found = client.get("/api/expenses/1")
        missing = client.get("/api/expenses/99")

    assert found.json()["title"] == "Dinner at Restaurant"
    assert missing.status_code == 404
    assert missing.json() == {"message": "Expense not found"}


def test_create_requires_title_amount_and_category() -> None:
    with TestClient(app) as client:
        response = client.post("/api/expenses", json={"title": "Taxi", "amount": 12})

    assert response.status_code == 400
    assert response.json()["message"] == "Please provide title, amount, and category"


def test_create_assigns_next_id_and_defaults() -> None:
    app.dependency_overrides[today] = _fixed_today
    with TestClient(app) as client:
        response = client.post(
            "/api/expenses", json={"title": "Taxi", "amount": "12.5", "category": "transportation"}
        )
        listing = client.get("/api/expenses").json()
    app.dependency_overrides.clear()

    assert response.status_code == 201
    payload = response.json()
    assert payload["id"] == 5
    assert payload["amount"] == 12.5
    assert payload["date"] == "2024-03-15"
    assert payload["notes"] == ""
    assert listing[0]["id"] == 5


def test_create_accepts_description_and_timestamp() -> None:
    with TestClient(app) as client:
        response = client.post(
            "/api/expenses",
            json={
                "description": "Bus pass",
                "amount": 30,
                "category": "transportation",
                "date": "2024-03-01T18:30:00.000Z",
                "notes": "monthly",
            },
        )

    assert response.status_code == 201
    assert response.json()["title"] == "Bus pass"
    assert response.json()["date"] == "2024-03-01"


def test_update_applies_only_sent_fields() -> None:
    with TestClient(app) as client:
        response = client.put("/api/expenses/2", json={"amount": 99.9, "title": "", "notes": ""})
        missing = client.put("/api/expenses/99", json={"amount": 1})

    assert response.status_code == 200
    payload = response.json()
    assert payload["amount"] == 99.9
    assert payload["title"] == "Grocery Shopping"
    assert payload["notes"] == ""
    assert missing.status_code == 404


def test_delete_returns_removed_expense() -> None:
    with TestClient(app) as client:
        deleted = client.delete("/api/expenses/3")
        after = client.get("/api/expenses/3")
        remaining = client.get("/api/expenses").json()
        again = client.delete("/api/expenses/3")

    assert deleted.status_code == 200
    assert deleted.json()["title"] == "Gas Station"
    assert after.status_code == 404
    assert len(remaining) == 3
    assert again.status_code == 404


def test_store_is_reset_for_each_lifespan() -> None:
    with TestClient(app) as client:
        client.delete("/api/expenses/1")
    with TestClient(app) as client:
        response = client.get("/api/expenses/1")

    assert response.status_code == 200


def test_statistics_are_cacheable() -> None:
    with TestClient(app) as client:
        response = client.get("/api/statistics")

    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, max-age=30"
    payload = response.json()
    assert payload["total"] == {"count": 4, "amount": 282.5}
    assert payload["categoryTotals"]["groceries"] == 120.5
    assert payload["recent"]["count"] == 4
    assert payload["avgDailySpend"] == 40.36


def test_health() -> None:
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.json() == {"status": "ok"}
