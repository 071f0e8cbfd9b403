from datetime import date

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.clock import today
from expense_dashboard.config import settings
from expense_dashboard.db import get_db
from expense_dashboard.schemas.report import (
    MonthlyTrendItem,
    ReportResponse,
    ReportSummary,
    ReportTableMeta,
    SpendingByCategoryItem,
    TopCategoryItem,
)
from expense_dashboard.services.aggregation import (
    ALL_CATEGORIES,
    FilterState,
    ReportView,
    SortKey,
    compute,
    select_records,
    summarize,
)
from expense_dashboard.services.category_store import load_category_meta
from expense_dashboard.services.expense_store import list_expenses
from expense_dashboard.services.periods import Period, period_label
from expense_dashboard.services.report_export import XLSX_MEDIA_TYPE, build_report_workbook

router = APIRouter(prefix="/reports", tags=["reports"])


def _filter_state(
    search: str = Query(default=""),
    category: str = Query(default=ALL_CATEGORIES),
    sort: SortKey = Query(default=SortKey.DATE_DESC),
    period: Period = Query(default=Period.ALL),
    page: int = Query(default=1, ge=1),
) -> FilterState:
    return FilterState(
        search_term=search,
        category_filter=category,
        sort_key=sort,
        period=period,
        page=page,
    )


def _to_response(view: ReportView) -> ReportResponse:
    summary = view.summary
    top = summary.top_category
    table = view.table
    return ReportResponse(
        period=view.filter.period.value,
        period_label=view.period_label,
        notice=view.notice,
        summary=ReportSummary(
            total_amount=summary.total_amount,
            total_count=summary.total_count,
            avg_daily_spend=summary.avg_daily_spend,
            top_category=(
                TopCategoryItem(category=top.category, amount=top.amount, percentage=top.percentage)
                if top is not None
                else None
            ),
            category_totals=summary.category_totals,
            monthly_trend=summary.monthly_trend,
        ),
        categories=[
            SpendingByCategoryItem(category=item.category, amount=item.amount, color=item.color)
            for item in view.categories
        ],
        monthly_trend=[
            MonthlyTrendItem(month=point.month, label=point.label, amount=point.amount)
            for point in view.trend
        ],
        items=table.items,
        meta=ReportTableMeta(
            page=table.page,
            page_size=table.page_size,
            total_items=table.total_items,
            total_pages=table.total_pages,
            start_item=table.start_item,
            end_item=table.end_item,
            has_previous=table.has_previous,
            has_next=table.has_next,
        ),
    )


@router.get("", response_model=ReportResponse)
async def report(
    state: FilterState = Depends(_filter_state),
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> ReportResponse:
    records = await list_expenses(db)
    view = compute(
        records,
        state,
        today=current_day,
        category_meta=await load_category_meta(db),
        page_size=settings.REPORT_PAGE_SIZE,
    )
    return _to_response(view)


@router.get("/export")
async def export_report(
    state: FilterState = Depends(_filter_state),
    current_day: date = Depends(today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    records, _ = select_records(await list_expenses(db), state, current_day)
    content = build_report_workbook(
        records,
        summarize(records),
        period_label=period_label(state.period, current_day),
    )
    filename = f"expense-report-{current_day.isoformat()}.xlsx"
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
