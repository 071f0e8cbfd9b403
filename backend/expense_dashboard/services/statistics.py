from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from expense_dashboard.schemas.expense import ExpenseRecord
from expense_dashboard.schemas.statistics import CountAmount, StatisticsResponse

AVG_WINDOW_DAYS = 7
RECENT_WINDOW_DAYS = 30


def compute_statistics(records: Sequence[ExpenseRecord], today: date) -> StatisticsResponse:
    """Store-wide statistics.

    Unlike the report view, the daily average here is over a fixed trailing
    week (sum of the last seven days divided by seven), whatever the span
    of the data.
    """
    categories: dict[str, CountAmount] = {}
    for record in records:
        bucket = categories.get(record.category)
        if bucket is None:
            categories[record.category] = CountAmount(count=1, amount=record.amount)
        else:
            bucket.count += 1
            bucket.amount += record.amount

    avg_daily_spend = 0.0
    if records:
        week_ago = today - timedelta(days=AVG_WINDOW_DAYS)
        week_total = sum(record.amount for record in records if record.date >= week_ago)
        avg_daily_spend = round(week_total / AVG_WINDOW_DAYS, 2)

    month_ago = today - timedelta(days=RECENT_WINDOW_DAYS)
    recent = [record for record in records if record.date >= month_ago]

    return StatisticsResponse(
        total=CountAmount(
            count=len(records),
            amount=sum(record.amount for record in records),
        ),
        categories=categories,
        category_totals={name: bucket.amount for name, bucket in categories.items()},
        recent=CountAmount(
            count=len(recent),
            amount=sum(record.amount for record in recent),
        ),
        avg_daily_spend=avg_daily_spend,
    )
