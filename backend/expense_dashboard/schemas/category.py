from pydantic import BaseModel, Field


class CategoryItem(BaseModel):
    id: int
    name: str
    icon: str | None
    color: str | None
    budget: float
    spent: float
    transactions: int


class CategoryCreateRequest(BaseModel):
    name: str | None = None
    icon: str | None = None
    color: str | None = None
    budget: float = Field(default=0, ge=0)


class CategoryUpdateRequest(BaseModel):
    name: str | None = None
    icon: str | None = None
    color: str | None = None
    budget: float | None = Field(default=None, ge=0)
