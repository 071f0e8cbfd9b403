"""Derived report views over a collection of expense records.

Everything here is a pure function of (records, filter state, today): the
input sequence is never mutated and every call builds fresh output
structures, so the same inputs always produce the same view.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from expense_dashboard.schemas.expense import ExpenseRecord
from expense_dashboard.services.periods import (
    Period,
    month_key,
    month_label,
    period_label,
    period_start,
)

ALL_CATEGORIES = "all"
DEFAULT_PAGE_SIZE = 5
CUSTOM_PERIOD_NOTICE = "Custom date range picker is not implemented yet; showing all dates"

FALLBACK_COLORS: tuple[str, ...] = (
    "#727cf5",
    "#0acf97",
    "#fa5c7c",
    "#ff9f43",
    "#323a46",
    "#6c757d",
)


class SortKey(StrEnum):
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    AMOUNT_DESC = "amount-desc"
    AMOUNT_ASC = "amount-asc"


@dataclass(frozen=True, slots=True)
class FilterState:
    search_term: str = ""
    category_filter: str = ALL_CATEGORIES
    sort_key: SortKey = SortKey.DATE_DESC
    period: Period = Period.ALL
    page: int = 1


@dataclass(frozen=True, slots=True)
class CategoryMeta:
    name: str
    icon: str | None = None
    color: str | None = None


@dataclass(slots=True)
class TopCategory:
    category: str
    amount: float
    percentage: int


@dataclass(slots=True)
class AggregateSummary:
    total_amount: float
    total_count: int
    avg_daily_spend: float
    top_category: TopCategory | None
    category_totals: dict[str, float]
    monthly_trend: dict[str, float]


@dataclass(slots=True)
class PagedTable:
    items: list[ExpenseRecord]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def start_item(self) -> int:
        if self.total_items == 0:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def end_item(self) -> int:
        return min(self.page * self.page_size, self.total_items)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(slots=True)
class CategorySlice:
    category: str
    amount: float
    color: str


@dataclass(slots=True)
class TrendPoint:
    month: str
    label: str
    amount: float


@dataclass(slots=True)
class ReportView:
    filter: FilterState
    summary: AggregateSummary
    table: PagedTable
    categories: list[CategorySlice] = field(default_factory=list)
    trend: list[TrendPoint] = field(default_factory=list)
    period_label: str = ""
    notice: str | None = None


def _matches_category(record: ExpenseRecord, category_filter: str) -> bool:
    return category_filter == ALL_CATEGORIES or record.category == category_filter


def _matches_search(record: ExpenseRecord, term: str) -> bool:
    return term in record.title.lower() or term in record.category.lower()


def filter_records(
    records: Sequence[ExpenseRecord], state: FilterState, today: date
) -> tuple[list[ExpenseRecord], str | None]:
    """Apply category, search and period filters in that order.

    Returns the surviving records and an optional informational notice.
    """
    term = state.search_term.lower()
    selected = [
        record
        for record in records
        if _matches_category(record, state.category_filter) and _matches_search(record, term)
    ]

    if state.period == Period.CUSTOM:
        return selected, CUSTOM_PERIOD_NOTICE

    start = period_start(state.period, today)
    if start is not None:
        selected = [record for record in selected if start <= record.date <= today]
    return selected, None


def sort_records(records: Sequence[ExpenseRecord], sort_key: SortKey) -> list[ExpenseRecord]:
    # sorted() is stable in both directions, ties keep their prior order
    if sort_key == SortKey.DATE_DESC:
        return sorted(records, key=lambda record: record.date, reverse=True)
    if sort_key == SortKey.DATE_ASC:
        return sorted(records, key=lambda record: record.date)
    if sort_key == SortKey.AMOUNT_DESC:
        return sorted(records, key=lambda record: record.amount, reverse=True)
    return sorted(records, key=lambda record: record.amount)


def select_records(
    records: Sequence[ExpenseRecord], state: FilterState, today: date
) -> tuple[list[ExpenseRecord], str | None]:
    """Filtered and sorted records, before pagination."""
    filtered, notice = filter_records(records, state, today)
    return sort_records(filtered, state.sort_key), notice


def category_totals(records: Sequence[ExpenseRecord]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for record in records:
        totals[record.category] = totals.get(record.category, 0.0) + record.amount
    return totals


def average_daily_spend(records: Sequence[ExpenseRecord]) -> float:
    if not records:
        return 0.0
    dates = [record.date for record in records]
    day_span = max(1, (max(dates) - min(dates)).days + 1)
    return sum(record.amount for record in records) / day_span


def top_category(totals: Mapping[str, float], total_amount: float) -> TopCategory | None:
    best: str | None = None
    best_amount = 0.0
    for category, amount in totals.items():
        # strict comparison: the first category to reach the maximum keeps it
        if best is None or amount > best_amount:
            best, best_amount = category, amount
    if best is None:
        return None
    percentage = round(best_amount / total_amount * 100) if total_amount else 0
    return TopCategory(category=best, amount=best_amount, percentage=percentage)


def monthly_trend(records: Sequence[ExpenseRecord]) -> dict[str, float]:
    buckets: dict[str, float] = {}
    for record in records:
        key = month_key(record.date)
        buckets[key] = buckets.get(key, 0.0) + record.amount
    # zero-padded YYYY-MM keys sort chronologically
    return {key: buckets[key] for key in sorted(buckets)}


def summarize(records: Sequence[ExpenseRecord]) -> AggregateSummary:
    totals = category_totals(records)
    total_amount = sum(record.amount for record in records)
    return AggregateSummary(
        total_amount=total_amount,
        total_count=len(records),
        avg_daily_spend=average_daily_spend(records),
        top_category=top_category(totals, total_amount),
        category_totals=totals,
        monthly_trend=monthly_trend(records),
    )


def paginate(
    records: Sequence[ExpenseRecord], page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> PagedTable:
    total_items = len(records)
    total_pages = math.ceil(total_items / page_size)
    current = min(max(page, 1), max(1, total_pages))
    start = (current - 1) * page_size
    return PagedTable(
        items=list(records[start : start + page_size]),
        page=current,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )


def _category_slices(
    totals: Mapping[str, float], category_meta: Mapping[str, CategoryMeta]
) -> list[CategorySlice]:
    slices: list[CategorySlice] = []
    for index, (category, amount) in enumerate(totals.items()):
        meta = category_meta.get(category)
        color = (meta.color if meta else None) or FALLBACK_COLORS[index % len(FALLBACK_COLORS)]
        slices.append(CategorySlice(category=category, amount=amount, color=color))
    return slices


def compute(
    records: Sequence[ExpenseRecord],
    state: FilterState,
    *,
    today: date,
    category_meta: Mapping[str, CategoryMeta] | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ReportView:
    ordered, notice = select_records(records, state, today)
    summary = summarize(ordered)
    table = paginate(ordered, state.page, page_size)

    return ReportView(
        filter=state,
        summary=summary,
        table=table,
        categories=_category_slices(summary.category_totals, category_meta or {}),
        trend=[
            TrendPoint(month=key, label=month_label(key), amount=amount)
            for key, amount in summary.monthly_trend.items()
        ],
        period_label=period_label(state.period, today),
        notice=notice,
    )
