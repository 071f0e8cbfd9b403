from pydantic import BaseModel, ConfigDict, Field


class CountAmount(BaseModel):
    count: int
    amount: float


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: CountAmount
    categories: dict[str, CountAmount]
    category_totals: dict[str, float] = Field(alias="categoryTotals")
    recent: CountAmount
    avg_daily_spend: float = Field(alias="avgDailySpend")
