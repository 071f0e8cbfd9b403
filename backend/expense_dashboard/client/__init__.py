from expense_dashboard.client.api import ExpenseApi
from expense_dashboard.client.cache import ExpenseCache, Notice, NoticeLevel
from expense_dashboard.client.controller import (
    AppState,
    CategoryFilterChanged,
    NextPage,
    PageSelected,
    PeriodChanged,
    PreviousPage,
    ReportController,
    SearchChanged,
    SortChanged,
    transition,
)
from expense_dashboard.client.outcomes import Available, Outcome, Rejected, Unavailable
from expense_dashboard.client.preferences import PreferencesStore, UserSettings

__all__ = [
    "ExpenseApi",
    "ExpenseCache",
    "Notice",
    "NoticeLevel",
    "AppState",
    "ReportController",
    "SearchChanged",
    "CategoryFilterChanged",
    "SortChanged",
    "PeriodChanged",
    "PageSelected",
    "NextPage",
    "PreviousPage",
    "transition",
    "Available",
    "Unavailable",
    "Rejected",
    "Outcome",
    "PreferencesStore",
    "UserSettings",
]
