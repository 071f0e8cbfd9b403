from datetime import date

from fastapi.testclient import TestClient

from expense_dashboard.clock import today
from expense_dashboard.config import settings
from expense_dashboard.main import app


def _fixed_today() -> date:
    return date(2024, 3, 15)


def test_categories_include_spending() -> None:
    with TestClient(app) as client:
        response = client.get("/api/categories")

    assert response.status_code == 200
    categories = {item["name"]: item for item in response.json()}
    assert len(categories) == 8
    assert categories["food"]["spent"] == 85
    assert categories["food"]["transactions"] == 1
    assert categories["health"]["transactions"] == 0


def test_category_crud() -> None:
    with TestClient(app) as client:
        created = client.post(
            "/api/categories", json={"name": "travel", "icon": "fa-plane", "color": "#00aaff"}
        )
        duplicate = client.post("/api/categories", json={"name": "travel"})
        nameless = client.post("/api/categories", json={"icon": "fa-tag"})
        updated = client.put("/api/categories/9", json={"budget": 150})
        renamed_clash = client.put("/api/categories/9", json={"name": "food"})
        deleted = client.delete("/api/categories/9")
        missing = client.get("/api/categories/9")

    assert created.status_code == 201
    assert created.json()["id"] == 9
    assert duplicate.status_code == 409
    assert nameless.status_code == 400
    assert nameless.json()["message"] == "Please provide a category name"
    assert updated.json()["budget"] == 150
    assert renamed_clash.status_code == 409
    assert deleted.json()["name"] == "travel"
    assert missing.status_code == 404


def test_budgets_track_spending_per_month(monkeypatch) -> None:
    monkeypatch.setattr(settings, "SEED_SAMPLE_DATA", False)
    app.dependency_overrides[today] = _fixed_today
    with TestClient(app) as client:
        created = client.post("/api/budgets", json={"category": "food", "amount": 500})
        duplicate = client.post("/api/budgets", json={"category": "food", "amount": 100})
        client.post(
            "/api/expenses",
            json={"title": "Market", "amount": 120, "category": "food", "date": "2024-03-02"},
        )
        client.post(
            "/api/expenses",
            json={"title": "Diner", "amount": 30, "category": "food", "date": "2024-02-10"},
        )
        march = client.get("/api/budgets?month=2024-03").json()
        february = client.get("/api/budgets/food?month=2024-02").json()
        summary = client.get("/api/budgets/summary?month=2024-03").json()
        bad_month = client.get("/api/budgets?month=March")
    app.dependency_overrides.clear()

    assert created.status_code == 201
    assert duplicate.status_code == 409
    assert march[0]["spent"] == 120
    assert february["spent"] == 30
    assert summary == {
        "month": "2024-03",
        "total_budget": 500,
        "total_spent": 120,
        "remaining": 380,
        "percent_used": 24,
        "days_remaining": 16,
    }
    assert bad_month.status_code == 400


def test_budget_update_and_delete_by_category() -> None:
    with TestClient(app) as client:
        updated = client.put("/api/budgets/food", json={"amount": 650})
        deleted = client.delete("/api/budgets/food")
        missing = client.get("/api/budgets/food")
        incomplete = client.post("/api/budgets", json={"category": "fun"})

    assert updated.status_code == 200
    assert updated.json()["amount"] == 650
    assert deleted.json()["category"] == "food"
    assert missing.status_code == 404
    assert incomplete.status_code == 400
