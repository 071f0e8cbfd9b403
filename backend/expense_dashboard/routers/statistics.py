from datetime import date

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.clock import today
from expense_dashboard.config import settings
from expense_dashboard.db import get_db
from expense_dashboard.schemas.statistics import StatisticsResponse
from expense_dashboard.services.expense_store import list_expenses
from expense_dashboard.services.statistics import compute_statistics

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsResponse)
async def statistics(
    response: Response,
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> StatisticsResponse:
    records = await list_expenses(db)
    response.headers["Cache-Control"] = f"public, max-age={settings.STATISTICS_CACHE_SECONDS}"
    return compute_statistics(records, current_day)
