from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.clock import today
from expense_dashboard.db import get_db
from expense_dashboard.schemas.expense import (
    ExpenseCreateRequest,
    ExpenseRecord,
    ExpenseUpdateRequest,
)
from expense_dashboard.services import expense_store

router = APIRouter(prefix="/expenses", tags=["expenses"])

NOT_FOUND = "Expense not found"


@router.get("", response_model=list[ExpenseRecord])
async def list_expenses(db: AsyncSession = Depends(get_db)) -> list[ExpenseRecord]:
    return await expense_store.list_expenses(db)


@router.get("/{expense_id}", response_model=ExpenseRecord)
async def get_expense(expense_id: int, db: AsyncSession = Depends(get_db)) -> ExpenseRecord:
    expense = await expense_store.get_expense(db, expense_id)
    if expense is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return expense


@router.post("", response_model=ExpenseRecord, status_code=status.HTTP_201_CREATED)
async def create_expense(
    payload: ExpenseCreateRequest,
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> ExpenseRecord:
    if payload.missing_fields():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please provide title, amount, and category",
        )
    return await expense_store.create_expense(db, payload, default_date=current_day)


@router.put("/{expense_id}", response_model=ExpenseRecord)
async def update_expense(
    expense_id: int,
    payload: ExpenseUpdateRequest,
    db: AsyncSession = Depends(get_db),
) -> ExpenseRecord:
    expense = await expense_store.update_expense(db, expense_id, payload)
    if expense is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return expense


@router.delete("/{expense_id}", response_model=ExpenseRecord)
async def delete_expense(expense_id: int, db: AsyncSession = Depends(get_db)) -> ExpenseRecord:
    expense = await expense_store.delete_expense(db, expense_id)
    if expense is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return expense
