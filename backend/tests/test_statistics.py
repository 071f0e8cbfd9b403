from datetime import date

import pytest

from expense_dashboard.schemas.expense import ExpenseRecord
from expense_dashboard.services.statistics import compute_statistics


def _record(id_: int, amount: float, category: str, day: str) -> ExpenseRecord:
    return ExpenseRecord(id=id_, title="x", amount=amount, category=category, date=day)


def test_statistics_windows_and_breakdown() -> None:
    records = [
        _record(1, 70, "food", "2024-03-15"),
        _record(2, 35, "transport", "2024-03-10"),
        _record(3, 100, "food", "2024-02-20"),
        _record(4, 10, "fun", "2024-01-01"),
    ]

    stats = compute_statistics(records, date(2024, 3, 15))

    assert stats.total.count == 4
    assert stats.total.amount == 215
    assert stats.categories["food"].count == 2
    assert stats.categories["food"].amount == 170
    assert stats.category_totals == {"food": 170, "transport": 35, "fun": 10}
    assert stats.recent.count == 3
    assert stats.recent.amount == 205
    assert stats.avg_daily_spend == 15.0


def test_statistics_average_is_rounded() -> None:
    stats = compute_statistics([_record(1, 10, "food", "2024-03-14")], date(2024, 3, 15))

    assert stats.avg_daily_spend == pytest.approx(1.43)


def test_statistics_for_empty_store() -> None:
    stats = compute_statistics([], date(2024, 3, 15))

    assert stats.total.count == 0
    assert stats.avg_daily_spend == 0
    assert stats.categories == {}


def test_statistics_serialize_with_camel_case_keys() -> None:
    payload = compute_statistics([], date(2024, 3, 15)).model_dump(by_alias=True)

    assert set(payload) == {"total", "categories", "categoryTotals", "recent", "avgDailySpend"}
