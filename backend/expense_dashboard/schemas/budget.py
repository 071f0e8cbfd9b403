from pydantic import BaseModel, Field


class BudgetItem(BaseModel):
    id: int
    category: str
    amount: float
    spent: float
    icon: str | None
    color: str | None


class BudgetCreateRequest(BaseModel):
    category: str | None = None
    amount: float | None = None
    icon: str | None = None
    color: str | None = None


class BudgetUpdateRequest(BaseModel):
    amount: float | None = Field(default=None, ge=0)
    icon: str | None = None
    color: str | None = None


class BudgetSummaryResponse(BaseModel):
    month: str
    total_budget: float
    total_spent: float
    remaining: float
    percent_used: int
    days_remaining: int
