from pydantic import BaseModel

from expense_dashboard.schemas.expense import ExpenseRecord


class TopCategoryItem(BaseModel):
    category: str
    amount: float
    percentage: int


class ReportSummary(BaseModel):
    total_amount: float
    total_count: int
    avg_daily_spend: float
    top_category: TopCategoryItem | None
    category_totals: dict[str, float]
    monthly_trend: dict[str, float]


class SpendingByCategoryItem(BaseModel):
    category: str
    amount: float
    color: str


class MonthlyTrendItem(BaseModel):
    month: str
    label: str
    amount: float


class ReportTableMeta(BaseModel):
    page: int
    page_size: int
    total_items: int
    total_pages: int
    start_item: int
    end_item: int
    has_previous: bool
    has_next: bool


class ReportResponse(BaseModel):
    period: str
    period_label: str
    notice: str | None
    summary: ReportSummary
    categories: list[SpendingByCategoryItem]
    monthly_trend: list[MonthlyTrendItem]
    items: list[ExpenseRecord]
    meta: ReportTableMeta
