from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.clock import today
from expense_dashboard.db import get_db
from expense_dashboard.schemas.budget import (
    BudgetCreateRequest,
    BudgetItem,
    BudgetSummaryResponse,
    BudgetUpdateRequest,
)
from expense_dashboard.services import budget_store
from expense_dashboard.services.budget_store import DuplicateBudgetError
from expense_dashboard.services.periods import parse_month

router = APIRouter(prefix="/budgets", tags=["budgets"])

NOT_FOUND = "Budget not found"


def _selected_month(month: str | None, current_day: date) -> tuple[int, int]:
    try:
        return parse_month(month, current_day)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="month must look like YYYY-MM"
        ) from exc


@router.get("", response_model=list[BudgetItem])
async def list_budgets(
    month: str | None = Query(default=None),
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> list[BudgetItem]:
    year, month_number = _selected_month(month, current_day)
    return await budget_store.list_budgets(db, year, month_number)


@router.get("/summary", response_model=BudgetSummaryResponse)
async def budget_summary(
    month: str | None = Query(default=None),
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> BudgetSummaryResponse:
    year, month_number = _selected_month(month, current_day)
    budgets = await budget_store.list_budgets(db, year, month_number)
    return budget_store.summarize_budgets(
        budgets, month=f"{year:04d}-{month_number:02d}", today=current_day
    )


@router.get("/{category}", response_model=BudgetItem)
async def get_budget(
    category: str,
    month: str | None = Query(default=None),
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> BudgetItem:
    year, month_number = _selected_month(month, current_day)
    budget = await budget_store.get_budget(db, category, year, month_number)
    if budget is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return budget


@router.post("", response_model=BudgetItem, status_code=status.HTTP_201_CREATED)
async def create_budget(
    payload: BudgetCreateRequest,
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> BudgetItem:
    if not payload.category or not payload.category.strip() or not payload.amount:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please provide category and amount",
        )
    try:
        return await budget_store.create_budget(
            db, payload, current_day.year, current_day.month
        )
    except DuplicateBudgetError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.put("/{category}", response_model=BudgetItem)
async def update_budget(
    category: str,
    payload: BudgetUpdateRequest,
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> BudgetItem:
    budget = await budget_store.update_budget(
        db, category, payload, current_day.year, current_day.month
    )
    if budget is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return budget


@router.delete("/{category}", response_model=BudgetItem)
async def delete_budget(
    category: str,
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> BudgetItem:
    budget = await budget_store.delete_budget(db, category, current_day.year, current_day.month)
    if budget is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return budget
