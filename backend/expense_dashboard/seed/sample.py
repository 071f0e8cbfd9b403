from collections.abc import Sequence
from datetime import date, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.db import async_session
from expense_dashboard.models.budget import Budget
from expense_dashboard.models.category import Category
from expense_dashboard.models.expense import Expense

# (name, icon, color, monthly budget)
CATEGORIES: Sequence[tuple[str, str, str, float]] = (
    ("food", "fa-utensils", "#727cf5", 500),
    ("groceries", "fa-shopping-basket", "#ff9f43", 400),
    ("transportation", "fa-gas-pump", "#0acf97", 300),
    ("entertainment", "fa-film", "#fa5c7c", 200),
    ("shopping", "fa-shopping-bag", "#727cf5", 0),
    ("utilities", "fa-bolt", "#323a46", 250),
    ("health", "fa-heartbeat", "#0acf97", 0),
    ("other", "fa-tag", "#6c757d", 0),
)

# (title, amount, category, days ago, notes)
EXPENSES: Sequence[tuple[str, float, str, int, str]] = (
    ("Dinner at Restaurant", 85.00, "food", 0, "Dinner with friends"),
    ("Grocery Shopping", 120.50, "groceries", 1, "Weekly groceries"),
    ("Gas Station", 45.00, "transportation", 2, "Filled up the tank"),
    ("Movie Tickets", 32.00, "entertainment", 3, "Weekend movie"),
)


def _expense_rows(today: date) -> list[Expense]:
    return [
        Expense(
            id=index,
            title=title,
            amount=amount,
            category=category,
            date=today - timedelta(days=days_ago),
            notes=notes,
        )
        for index, (title, amount, category, days_ago, notes) in enumerate(EXPENSES, start=1)
    ]


def _category_rows() -> list[Category]:
    return [
        Category(id=index, name=name, icon=icon, color=color, budget=budget)
        for index, (name, icon, color, budget) in enumerate(CATEGORIES, start=1)
    ]


def _budget_rows() -> list[Budget]:
    budgeted = [entry for entry in CATEGORIES if entry[3] > 0]
    return [
        Budget(id=index, category=name, amount=budget, icon=icon, color=color)
        for index, (name, icon, color, budget) in enumerate(budgeted, start=1)
    ]


async def seed_session(session: AsyncSession, today: date) -> tuple[int, int, int]:
    expenses = _expense_rows(today)
    categories = _category_rows()
    budgets = _budget_rows()
    session.add_all([*categories, *budgets, *expenses])
    await session.commit()
    return len(expenses), len(categories), len(budgets)


async def seed_store(today: date | None = None) -> tuple[int, int, int]:
    async with async_session() as session:
        return await seed_session(session, today or date.today())
