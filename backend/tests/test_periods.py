from datetime import date

import pytest

from expense_dashboard.services.periods import (
    Period,
    days_remaining_in_month,
    month_label,
    parse_month,
    period_label,
    period_start,
)


def test_period_start_dates() -> None:
    today = date(2024, 5, 20)

    assert period_start(Period.WEEK, today) == date(2024, 5, 13)
    assert period_start(Period.MONTH, today) == date(2024, 5, 1)
    assert period_start(Period.QUARTER, today) == date(2024, 4, 1)
    assert period_start(Period.YEAR, today) == date(2024, 1, 1)
    assert period_start(Period.CUSTOM, today) is None
    assert period_start(Period.ALL, today) is None


def test_period_labels() -> None:
    today = date(2024, 11, 3)

    assert period_label(Period.WEEK, today) == "10/27/2024 - 11/3/2024"
    assert period_label(Period.MONTH, today) == "November 2024"
    assert period_label(Period.QUARTER, today) == "Q4 2024"
    assert period_label(Period.YEAR, today) == "2024"


def test_month_label_from_key() -> None:
    assert month_label("2023-05") == "May 2023"


def test_days_remaining_in_leap_february() -> None:
    assert days_remaining_in_month(date(2024, 2, 10)) == 19


def test_parse_month_defaults_to_current_month() -> None:
    assert parse_month(None, date(2024, 7, 4)) == (2024, 7)
    assert parse_month("2023-12", date(2024, 7, 4)) == (2023, 12)


@pytest.mark.parametrize("value", ["2024", "2024-13", "May-2024"])
def test_parse_month_rejects_bad_values(value: str) -> None:
    with pytest.raises(ValueError):
        parse_month(value, date(2024, 7, 4))
