from expense_dashboard.models.budget import Budget
from expense_dashboard.models.category import Category
from expense_dashboard.models.expense import Expense

__all__ = [
    "Budget",
    "Category",
    "Expense",
]
