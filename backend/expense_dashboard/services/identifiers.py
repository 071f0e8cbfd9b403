from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession


def next_id(existing: Iterable[int]) -> int:
    """max(existing) + 1, or 1 for an empty collection."""
    return max(existing, default=0) + 1


async def allocate_id(db: AsyncSession, model) -> int:
    current = await db.scalar(select(func.max(model.id)))
    return next_id([current] if current is not None else [])
