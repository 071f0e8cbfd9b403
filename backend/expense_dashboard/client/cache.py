"""In-memory record cache with the offline fallback policy.

The cache owns the client's copy of the expense collection. Reads never
fail: when the service is unavailable the built-in sample set takes its
place. Mutations are applied locally whenever the service cannot be
reached, so the dashboard stays usable offline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from expense_dashboard.client.api import ExpenseApi
from expense_dashboard.client.outcomes import Available, Outcome, Rejected
from expense_dashboard.client.sample_data import OFFLINE_EXPENSES
from expense_dashboard.clock import today as system_today
from expense_dashboard.schemas.expense import (
    ExpenseCreateRequest,
    ExpenseRecord,
    ExpenseUpdateRequest,
)
from expense_dashboard.services.aggregation import CategoryMeta
from expense_dashboard.services.identifiers import next_id

logger = logging.getLogger(__name__)


class NoticeLevel(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    level: NoticeLevel
    message: str


class ExpenseCache:
    """Client copy of the expense records.

    By default only an unreachable or failing (5xx) service falls back to
    local changes; a 4xx rejection is reported and leaves the records alone.
    """

    def __init__(
        self,
        api: ExpenseApi,
        *,
        fallback: Sequence[ExpenseRecord] = OFFLINE_EXPENSES,
        mask_rejections: bool = False,
        today: Callable[[], date] = system_today,
    ) -> None:
        self._api = api
        self._fallback = tuple(fallback)
        self._records: list[ExpenseRecord] = []
        self._today = today
        # True reproduces the old client: any failure, including a 400 or
        # 404 from a live backend, falls through to the local path
        self.mask_rejections = mask_rejections
        self.offline = False
        self.notices: list[Notice] = []

    @property
    def records(self) -> list[ExpenseRecord]:
        return list(self._records)

    def _notify(self, level: NoticeLevel, message: str) -> None:
        self.notices.append(Notice(level=level, message=message))

    def _falls_back(self, outcome: Outcome) -> bool:
        if isinstance(outcome, Rejected) and not self.mask_rejections:
            logger.info("Request rejected (%d): %s", outcome.status_code, outcome.message)
            self._notify(NoticeLevel.ERROR, outcome.message)
            return False
        self.offline = True
        return True

    def _index_of(self, expense_id: int) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == expense_id:
                return index
        return None

    def replace_all(self, records: Sequence[ExpenseRecord]) -> None:
        self._records = list(records)

    async def load(self) -> list[ExpenseRecord]:
        outcome = await self._api.list_expenses()
        if isinstance(outcome, Available):
            self._records = list(outcome.data)
            self.offline = False
            return self.records

        logger.warning("Falling back to sample expenses: %s", outcome)
        self._records = list(self._fallback)
        self.offline = True
        self._notify(NoticeLevel.WARNING, "Using offline mode with sample data")
        return self.records

    async def add(self, draft: ExpenseCreateRequest) -> ExpenseRecord | None:
        outcome = await self._api.create_expense(draft)
        if isinstance(outcome, Available):
            self._records.insert(0, outcome.data)
            self._notify(NoticeLevel.SUCCESS, "Expense added successfully!")
            return outcome.data
        if not self._falls_back(outcome):
            return None

        record = ExpenseRecord(
            id=next_id(record.id for record in self._records),
            title=draft.title or "",
            amount=draft.amount or 0.0,
            category=draft.category or "",
            date=draft.date or self._today(),
            notes=draft.notes or "",
        )
        self._records.insert(0, record)
        self._notify(NoticeLevel.WARNING, "Expense added in offline mode")
        return record

    async def update(
        self, expense_id: int, changes: ExpenseUpdateRequest
    ) -> ExpenseRecord | None:
        outcome = await self._api.update_expense(expense_id, changes)
        index = self._index_of(expense_id)
        if isinstance(outcome, Available):
            if index is None:
                self._records.insert(0, outcome.data)
            else:
                self._records[index] = outcome.data
            self._notify(NoticeLevel.SUCCESS, "Expense updated successfully!")
            return outcome.data
        if not self._falls_back(outcome):
            return None

        if index is None:
            self._notify(NoticeLevel.WARNING, "Expense not found in offline data")
            return None
        record = self._records[index].model_copy(update=changes.changes())
        self._records[index] = record
        self._notify(NoticeLevel.WARNING, "Expense updated in offline mode")
        return record

    async def delete(self, expense_id: int) -> ExpenseRecord | None:
        outcome = await self._api.delete_expense(expense_id)
        index = self._index_of(expense_id)
        if isinstance(outcome, Available):
            if index is not None:
                del self._records[index]
            self._notify(NoticeLevel.SUCCESS, "Expense deleted successfully!")
            return outcome.data
        if not self._falls_back(outcome):
            return None

        if index is None:
            return None
        removed = self._records.pop(index)
        self._notify(NoticeLevel.WARNING, "Expense deleted in offline mode")
        return removed

    async def load_category_meta(self) -> dict[str, CategoryMeta] | None:
        """Stored icon and colour per category, or None when unavailable."""
        outcome = await self._api.list_categories()
        if not isinstance(outcome, Available):
            logger.info("Category metadata unavailable: %s", outcome)
            return None
        return {
            item.name: CategoryMeta(name=item.name, icon=item.icon, color=item.color)
            for item in outcome.data
        }
