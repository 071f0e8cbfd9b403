from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.models.expense import Expense
from expense_dashboard.schemas.expense import (
    ExpenseCreateRequest,
    ExpenseRecord,
    ExpenseUpdateRequest,
)
from expense_dashboard.services.identifiers import allocate_id


async def list_expenses(db: AsyncSession) -> list[ExpenseRecord]:
    # newest inserted first
    rows = (await db.execute(select(Expense).order_by(Expense.id.desc()))).scalars().all()
    return [ExpenseRecord.model_validate(row) for row in rows]


async def get_expense(db: AsyncSession, expense_id: int) -> ExpenseRecord | None:
    expense = await db.get(Expense, expense_id)
    if expense is None:
        return None
    return ExpenseRecord.model_validate(expense)


async def create_expense(
    db: AsyncSession, payload: ExpenseCreateRequest, *, default_date: date
) -> ExpenseRecord:
    expense = Expense(
        id=await allocate_id(db, Expense),
        title=payload.title,
        amount=float(payload.amount),
        category=payload.category,
        date=payload.date or default_date,
        notes=payload.notes or "",
    )
    db.add(expense)
    await db.commit()
    await db.refresh(expense)
    return ExpenseRecord.model_validate(expense)


async def update_expense(
    db: AsyncSession, expense_id: int, payload: ExpenseUpdateRequest
) -> ExpenseRecord | None:
    expense = await db.get(Expense, expense_id)
    if expense is None:
        return None

    for name, value in payload.changes().items():
        setattr(expense, name, value)
    await db.commit()
    await db.refresh(expense)
    return ExpenseRecord.model_validate(expense)


async def delete_expense(db: AsyncSession, expense_id: int) -> ExpenseRecord | None:
    expense = await db.get(Expense, expense_id)
    if expense is None:
        return None

    deleted = ExpenseRecord.model_validate(expense)
    await db.delete(expense)
    await db.commit()
    return deleted
