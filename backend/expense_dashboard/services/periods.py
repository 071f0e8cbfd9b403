from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import StrEnum


class Period(StrEnum):
    ALL = "all"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    CUSTOM = "custom"


def period_start(period: Period, today: date) -> date | None:
    """First day included by ``period``; None when the period does not bound dates."""
    if period == Period.WEEK:
        return today - timedelta(days=7)
    if period == Period.MONTH:
        return today.replace(day=1)
    if period == Period.QUARTER:
        first_month = (today.month - 1) // 3 * 3 + 1
        return date(today.year, first_month, 1)
    if period == Period.YEAR:
        return date(today.year, 1, 1)
    return None


def _short(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def period_label(period: Period, today: date) -> str:
    if period == Period.WEEK:
        return f"{_short(today - timedelta(days=7))} - {_short(today)}"
    if period == Period.MONTH:
        return f"{calendar.month_name[today.month]} {today.year}"
    if period == Period.QUARTER:
        return f"Q{(today.month - 1) // 3 + 1} {today.year}"
    if period == Period.YEAR:
        return str(today.year)
    if period == Period.CUSTOM:
        return "Custom range"
    return "All time"


def month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def month_label(key: str) -> str:
    year, month = key.split("-")
    return f"{calendar.month_name[int(month)]} {year}"


def days_remaining_in_month(today: date) -> int:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return last_day - today.day


def parse_month(value: str | None, today: date) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` selector, defaulting to the current month."""
    if not value:
        return today.year, today.month
    year, month = value.split("-", 1)
    parsed = (int(year), int(month))
    if not 1 <= parsed[1] <= 12:
        raise ValueError(f"Invalid month: {value}")
    return parsed
