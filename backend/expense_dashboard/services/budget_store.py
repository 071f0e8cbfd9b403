from __future__ import annotations

import calendar
from collections.abc import Sequence
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.models.budget import Budget
from expense_dashboard.models.expense import Expense
from expense_dashboard.schemas.budget import (
    BudgetCreateRequest,
    BudgetItem,
    BudgetSummaryResponse,
    BudgetUpdateRequest,
)
from expense_dashboard.services.identifiers import allocate_id
from expense_dashboard.services.periods import days_remaining_in_month


class DuplicateBudgetError(ValueError):
    pass


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


async def _spent_by_category(db: AsyncSession, year: int, month: int) -> dict[str, float]:
    start, end = _month_bounds(year, month)
    stmt = (
        select(Expense.category, func.coalesce(func.sum(Expense.amount), 0))
        .where(Expense.date >= start, Expense.date <= end)
        .group_by(Expense.category)
    )
    rows = (await db.execute(stmt)).all()
    return {row[0]: float(row[1] or 0) for row in rows}


def _to_item(budget: Budget, spent: dict[str, float]) -> BudgetItem:
    return BudgetItem(
        id=budget.id,
        category=budget.category,
        amount=float(budget.amount),
        spent=spent.get(budget.category, 0.0),
        icon=budget.icon,
        color=budget.color,
    )


async def _find(db: AsyncSession, category: str) -> Budget | None:
    stmt = select(Budget).where(Budget.category == category)
    return (await db.execute(stmt)).scalar_one_or_none()


async def list_budgets(db: AsyncSession, year: int, month: int) -> list[BudgetItem]:
    budgets = (await db.execute(select(Budget).order_by(Budget.id.asc()))).scalars().all()
    spent = await _spent_by_category(db, year, month)
    return [_to_item(budget, spent) for budget in budgets]


async def get_budget(db: AsyncSession, category: str, year: int, month: int) -> BudgetItem | None:
    budget = await _find(db, category)
    if budget is None:
        return None
    return _to_item(budget, await _spent_by_category(db, year, month))


async def create_budget(
    db: AsyncSession, payload: BudgetCreateRequest, year: int, month: int
) -> BudgetItem:
    category = (payload.category or "").strip()
    if await _find(db, category) is not None:
        raise DuplicateBudgetError(f"A budget for '{category}' already exists")

    budget = Budget(
        id=await allocate_id(db, Budget),
        category=category,
        amount=float(payload.amount or 0),
        icon=payload.icon,
        color=payload.color,
    )
    db.add(budget)
    await db.commit()
    await db.refresh(budget)
    return _to_item(budget, await _spent_by_category(db, year, month))


async def update_budget(
    db: AsyncSession, category: str, payload: BudgetUpdateRequest, year: int, month: int
) -> BudgetItem | None:
    budget = await _find(db, category)
    if budget is None:
        return None

    if payload.amount is not None:
        budget.amount = payload.amount
    if payload.icon:
        budget.icon = payload.icon
    if payload.color:
        budget.color = payload.color
    await db.commit()
    await db.refresh(budget)
    return _to_item(budget, await _spent_by_category(db, year, month))


async def delete_budget(
    db: AsyncSession, category: str, year: int, month: int
) -> BudgetItem | None:
    budget = await _find(db, category)
    if budget is None:
        return None

    deleted = _to_item(budget, await _spent_by_category(db, year, month))
    await db.delete(budget)
    await db.commit()
    return deleted


def summarize_budgets(
    budgets: Sequence[BudgetItem], *, month: str, today: date
) -> BudgetSummaryResponse:
    total_budget = sum(budget.amount for budget in budgets)
    total_spent = sum(budget.spent for budget in budgets)
    percent_used = round(total_spent / total_budget * 100) if total_budget > 0 else 0
    return BudgetSummaryResponse(
        month=month,
        total_budget=total_budget,
        total_spent=total_spent,
        remaining=total_budget - total_spent,
        percent_used=percent_used,
        days_remaining=days_remaining_in_month(today),
    )
