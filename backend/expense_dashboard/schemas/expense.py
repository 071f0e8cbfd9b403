from datetime import date, datetime
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field


def _calendar_date(value: Any) -> Any:
    # clients send either YYYY-MM-DD or a full ISO timestamp; only the day matters
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


RecordDate = Annotated[date, BeforeValidator(_calendar_date)]

_TITLE_ALIASES = AliasChoices("title", "description")


class ExpenseRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str = Field(validation_alias=_TITLE_ALIASES)
    amount: float
    category: str
    date: RecordDate
    notes: str | None = None


class ExpenseCreateRequest(BaseModel):
    # presence of title, amount and category is checked by the router so a
    # missing field yields 400 rather than a schema error
    title: str | None = Field(default=None, validation_alias=_TITLE_ALIASES)
    amount: float | None = None
    category: str | None = None
    date: RecordDate | None = None
    notes: str | None = None

    def missing_fields(self) -> list[str]:
        return [
            name
            for name, value in (
                ("title", self.title),
                ("amount", self.amount),
                ("category", self.category),
            )
            if not value
        ]


class ExpenseUpdateRequest(BaseModel):
    title: str | None = Field(default=None, validation_alias=_TITLE_ALIASES)
    amount: float | None = None
    category: str | None = None
    date: RecordDate | None = None
    notes: str | None = None

    def changes(self) -> dict[str, Any]:
        """Fields a partial update actually overwrites.

        Empty title/category/date and a zero amount leave the stored value
        alone; notes are replaced whenever they are sent, even when blank.
        """
        changes: dict[str, Any] = {}
        if self.title:
            changes["title"] = self.title
        if self.amount:
            changes["amount"] = self.amount
        if self.category:
            changes["category"] = self.category
        if self.date:
            changes["date"] = self.date
        if self.notes is not None:
            changes["notes"] = self.notes
        return changes
