from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from expense_dashboard.db import get_db
from expense_dashboard.schemas.category import (
    CategoryCreateRequest,
    CategoryItem,
    CategoryUpdateRequest,
)
from expense_dashboard.services import category_store
from expense_dashboard.services.category_store import DuplicateCategoryError

router = APIRouter(prefix="/categories", tags=["categories"])

NOT_FOUND = "Category not found"


@router.get("", response_model=list[CategoryItem])
async def list_categories(db: AsyncSession = Depends(get_db)) -> list[CategoryItem]:
    return await category_store.list_categories(db)


@router.get("/{category_id}", response_model=CategoryItem)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)) -> CategoryItem:
    category = await category_store.get_category(db, category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return category


@router.post("", response_model=CategoryItem, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryCreateRequest, db: AsyncSession = Depends(get_db)
) -> CategoryItem:
    if not payload.name or not payload.name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Please provide a category name"
        )
    try:
        return await category_store.create_category(db, payload)
    except DuplicateCategoryError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.put("/{category_id}", response_model=CategoryItem)
async def update_category(
    category_id: int,
    payload: CategoryUpdateRequest,
    db: AsyncSession = Depends(get_db),
) -> CategoryItem:
    try:
        category = await category_store.update_category(db, category_id, payload)
    except DuplicateCategoryError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return category


@router.delete("/{category_id}", response_model=CategoryItem)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)) -> CategoryItem:
    category = await category_store.delete_category(db, category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return category
