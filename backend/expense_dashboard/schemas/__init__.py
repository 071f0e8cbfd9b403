from expense_dashboard.schemas.budget import (
    BudgetCreateRequest,
    BudgetItem,
    BudgetSummaryResponse,
    BudgetUpdateRequest,
)
from expense_dashboard.schemas.category import (
    CategoryCreateRequest,
    CategoryItem,
    CategoryUpdateRequest,
)
from expense_dashboard.schemas.expense import (
    ExpenseCreateRequest,
    ExpenseRecord,
    ExpenseUpdateRequest,
)
from expense_dashboard.schemas.report import (
    MonthlyTrendItem,
    ReportResponse,
    ReportSummary,
    ReportTableMeta,
    SpendingByCategoryItem,
    TopCategoryItem,
)
from expense_dashboard.schemas.statistics import CountAmount, StatisticsResponse

__all__ = [
    "ExpenseRecord",
    "ExpenseCreateRequest",
    "ExpenseUpdateRequest",
    "CountAmount",
    "StatisticsResponse",
    "CategoryItem",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "BudgetItem",
    "BudgetCreateRequest",
    "BudgetUpdateRequest",
    "BudgetSummaryResponse",
    "TopCategoryItem",
    "ReportSummary",
    "SpendingByCategoryItem",
    "MonthlyTrendItem",
    "ReportTableMeta",
    "ReportResponse",
]
