from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Union

from expense_dashboard.client.cache import ExpenseCache, Notice, NoticeLevel
from expense_dashboard.clock import today as system_today
from expense_dashboard.config import settings
from expense_dashboard.schemas.expense import ExpenseCreateRequest, ExpenseUpdateRequest
from expense_dashboard.services.aggregation import (
    CategoryMeta,
    FilterState,
    ReportView,
    SortKey,
    compute,
)
from expense_dashboard.services.periods import Period


@dataclass(frozen=True, slots=True)
class SearchChanged:
    term: str


@dataclass(frozen=True, slots=True)
class CategoryFilterChanged:
    category: str


@dataclass(frozen=True, slots=True)
class SortChanged:
    sort_key: SortKey


@dataclass(frozen=True, slots=True)
class PeriodChanged:
    period: Period


@dataclass(frozen=True, slots=True)
class PageSelected:
    page: int


@dataclass(frozen=True, slots=True)
class NextPage:
    pass


@dataclass(frozen=True, slots=True)
class PreviousPage:
    pass


Event = Union[
    SearchChanged,
    CategoryFilterChanged,
    SortChanged,
    PeriodChanged,
    PageSelected,
    NextPage,
    PreviousPage,
]


def transition(state: FilterState, event: Event, total_pages: int) -> FilterState:
    """Next filter state for a UI event.

    Changing what is shown (search, category, sort, period) starts over at
    page 1; page navigation keeps every other field as it is.
    """
    if isinstance(event, SearchChanged):
        return replace(state, search_term=event.term, page=1)
    if isinstance(event, CategoryFilterChanged):
        return replace(state, category_filter=event.category, page=1)
    if isinstance(event, SortChanged):
        return replace(state, sort_key=SortKey(event.sort_key), page=1)
    if isinstance(event, PeriodChanged):
        return replace(state, period=Period(event.period), page=1)
    if isinstance(event, PageSelected):
        return replace(state, page=event.page)
    if isinstance(event, NextPage):
        return replace(state, page=state.page + 1) if state.page < total_pages else state
    if isinstance(event, PreviousPage):
        return replace(state, page=state.page - 1) if state.page > 1 else state
    raise TypeError(f"Unsupported event: {event!r}")


@dataclass
class AppState:
    filter: FilterState = field(default_factory=FilterState)
    view: ReportView | None = None
    notices: list[Notice] = field(default_factory=list)


class ReportController:
    """Owns the dashboard state and keeps the report view in step with it.

    Every event and every mutation ends with a full recomputation, so
    callers never observe a view that lags behind the cached records.
    """

    def __init__(
        self,
        cache: ExpenseCache,
        *,
        category_meta: Mapping[str, CategoryMeta] | None = None,
        page_size: int | None = None,
        today: Callable[[], date] = system_today,
    ) -> None:
        self.cache = cache
        self.state = AppState()
        self._category_meta = dict(category_meta or {})
        self._page_size = page_size or settings.REPORT_PAGE_SIZE
        self._today = today

    @property
    def view(self) -> ReportView:
        if self.state.view is None:
            return self.refresh()
        return self.state.view

    def refresh(self) -> ReportView:
        view = compute(
            self.cache.records,
            self.state.filter,
            today=self._today(),
            category_meta=self._category_meta,
            page_size=self._page_size,
        )
        # keep the stored page in the range the view actually shows
        if view.table.page != self.state.filter.page:
            self.state.filter = replace(self.state.filter, page=view.table.page)
            view.filter = self.state.filter
        self.state.view = view
        return view

    def dispatch(self, event: Event) -> ReportView:
        total_pages = self.view.table.total_pages
        self.state.filter = transition(self.state.filter, event, total_pages)
        view = self.refresh()
        if isinstance(event, PeriodChanged) and view.notice:
            self.state.notices.append(Notice(level=NoticeLevel.INFO, message=view.notice))
        return view

    def drain_notices(self) -> list[Notice]:
        notices = [*self.cache.notices, *self.state.notices]
        self.cache.notices.clear()
        self.state.notices.clear()
        return notices

    async def load(self) -> ReportView:
        await self.cache.load()
        category_meta = await self.cache.load_category_meta()
        if category_meta is not None:
            self._category_meta = category_meta
        return self.refresh()

    async def add_expense(self, draft: ExpenseCreateRequest) -> ReportView:
        await self.cache.add(draft)
        return self.refresh()

    async def update_expense(self, expense_id: int, changes: ExpenseUpdateRequest) -> ReportView:
        await self.cache.update(expense_id, changes)
        return self.refresh()

    async def delete_expense(self, expense_id: int) -> ReportView:
        await self.cache.delete(expense_id)
        return self.refresh()
