from expense_dashboard.routers.budgets import router as budgets_router
from expense_dashboard.routers.categories import router as categories_router
from expense_dashboard.routers.expenses import router as expenses_router
from expense_dashboard.routers.reports import router as reports_router
from expense_dashboard.routers.statistics import router as statistics_router

__all__ = [
    "expenses_router",
    "statistics_router",
    "categories_router",
    "budgets_router",
    "reports_router",
]
