from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.models.category import Category
from expense_dashboard.models.expense import Expense
from expense_dashboard.schemas.category import (
    CategoryCreateRequest,
    CategoryItem,
    CategoryUpdateRequest,
)
from expense_dashboard.services.aggregation import CategoryMeta
from expense_dashboard.services.identifiers import allocate_id


class DuplicateCategoryError(ValueError):
    pass


async def _spending_by_category(db: AsyncSession) -> dict[str, tuple[float, int]]:
    stmt = select(
        Expense.category,
        func.coalesce(func.sum(Expense.amount), 0),
        func.count(Expense.id),
    ).group_by(Expense.category)
    rows = (await db.execute(stmt)).all()
    return {row[0]: (float(row[1] or 0), int(row[2] or 0)) for row in rows}


def _to_item(category: Category, spending: dict[str, tuple[float, int]]) -> CategoryItem:
    spent, transactions = spending.get(category.name, (0.0, 0))
    return CategoryItem(
        id=category.id,
        name=category.name,
        icon=category.icon,
        color=category.color,
        budget=float(category.budget or 0),
        spent=spent,
        transactions=transactions,
    )


async def _ensure_unique_name(db: AsyncSession, name: str, exclude_id: int | None = None) -> None:
    stmt = select(func.count()).select_from(Category).where(Category.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Category.id != exclude_id)
    if await db.scalar(stmt):
        raise DuplicateCategoryError(f"Category '{name}' already exists")


async def list_categories(db: AsyncSession) -> list[CategoryItem]:
    categories = (await db.execute(select(Category).order_by(Category.id.asc()))).scalars().all()
    spending = await _spending_by_category(db)
    return [_to_item(category, spending) for category in categories]


async def get_category(db: AsyncSession, category_id: int) -> CategoryItem | None:
    category = await db.get(Category, category_id)
    if category is None:
        return None
    return _to_item(category, await _spending_by_category(db))


async def create_category(db: AsyncSession, payload: CategoryCreateRequest) -> CategoryItem:
    name = (payload.name or "").strip()
    await _ensure_unique_name(db, name)

    category = Category(
        id=await allocate_id(db, Category),
        name=name,
        icon=payload.icon,
        color=payload.color,
        budget=payload.budget,
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)
    return _to_item(category, await _spending_by_category(db))


async def update_category(
    db: AsyncSession, category_id: int, payload: CategoryUpdateRequest
) -> CategoryItem | None:
    category = await db.get(Category, category_id)
    if category is None:
        return None

    if payload.name and payload.name.strip():
        name = payload.name.strip()
        await _ensure_unique_name(db, name, exclude_id=category_id)
        category.name = name
    if payload.icon:
        category.icon = payload.icon
    if payload.color:
        category.color = payload.color
    if payload.budget is not None:
        category.budget = payload.budget
    await db.commit()
    await db.refresh(category)
    return _to_item(category, await _spending_by_category(db))


async def delete_category(db: AsyncSession, category_id: int) -> CategoryItem | None:
    category = await db.get(Category, category_id)
    if category is None:
        return None

    deleted = _to_item(category, await _spending_by_category(db))
    await db.delete(category)
    await db.commit()
    return deleted


async def load_category_meta(db: AsyncSession) -> dict[str, CategoryMeta]:
    categories = (await db.execute(select(Category))).scalars().all()
    return {
        category.name: CategoryMeta(name=category.name, icon=category.icon, color=category.color)
        for category in categories
    }
