import asyncio
from datetime import date, timedelta

import httpx
import pytest

from expense_dashboard.client.api import ExpenseApi
from expense_dashboard.client.cache import ExpenseCache, NoticeLevel
from expense_dashboard.client.controller import (
    CategoryFilterChanged,
    NextPage,
    PageSelected,
    PeriodChanged,
    PreviousPage,
    ReportController,
    SearchChanged,
    SortChanged,
    transition,
)
from expense_dashboard.schemas.expense import ExpenseCreateRequest, ExpenseRecord
from expense_dashboard.services.aggregation import (
    CUSTOM_PERIOD_NOTICE,
    CategoryMeta,
    FilterState,
    SortKey,
)
from expense_dashboard.services.periods import Period

TODAY = date(2024, 3, 15)


def _records() -> list[ExpenseRecord]:
    categories = ["food", "transport", "food", "fun", "food", "transport", "fun"]
    return [
        ExpenseRecord(
            id=index + 1,
            title=f"Expense {index + 1}",
            amount=10.0 * (index + 1),
            category=category,
            date=TODAY - timedelta(days=index),
        )
        for index, category in enumerate(categories)
    ]


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _controller(handler=_unreachable) -> ReportController:
    api = ExpenseApi("http://testserver/api", transport=httpx.MockTransport(handler))
    cache = ExpenseCache(api, today=lambda: TODAY)
    cache.replace_all(_records())
    return ReportController(cache, page_size=5, today=lambda: TODAY)


@pytest.mark.parametrize(
    "event",
    [
        SearchChanged("food"),
        CategoryFilterChanged("fun"),
        SortChanged(SortKey.AMOUNT_ASC),
        PeriodChanged(Period.MONTH),
    ],
)
def test_filter_changes_reset_page(event) -> None:
    state = FilterState(page=3)

    assert transition(state, event, total_pages=4).page == 1


def test_page_navigation_is_bounded() -> None:
    first = FilterState(page=1)
    last = FilterState(page=2)

    assert transition(first, PreviousPage(), total_pages=2) is first
    assert transition(last, NextPage(), total_pages=2) is last
    assert transition(first, NextPage(), total_pages=2).page == 2
    assert transition(last, PreviousPage(), total_pages=2).page == 1
    assert transition(first, PageSelected(2), total_pages=2).page == 2


def test_page_navigation_keeps_other_fields() -> None:
    state = FilterState(search_term="coffee", sort_key=SortKey.AMOUNT_DESC, page=1)

    moved = transition(state, NextPage(), total_pages=3)

    assert moved.search_term == "coffee"
    assert moved.sort_key == SortKey.AMOUNT_DESC


def test_unknown_event_is_rejected() -> None:
    with pytest.raises(TypeError):
        transition(FilterState(), object(), total_pages=1)


def test_dispatch_recomputes_view() -> None:
    controller = _controller()

    assert controller.view.table.total_pages == 2
    assert controller.dispatch(NextPage()).table.page == 2
    assert controller.dispatch(NextPage()).table.page == 2

    view = controller.dispatch(CategoryFilterChanged("food"))

    assert view.table.page == 1
    assert view.summary.total_count == 3
    assert view.summary.total_amount == 90.0
    assert controller.state.filter.category_filter == "food"


def test_selected_page_is_clamped_into_range() -> None:
    controller = _controller()

    view = controller.dispatch(PageSelected(9))

    assert view.table.page == 2
    assert controller.state.filter.page == 2
    assert view.filter.page == 2


def test_custom_period_raises_info_notice() -> None:
    controller = _controller()

    view = controller.dispatch(PeriodChanged(Period.CUSTOM))
    notices = controller.drain_notices()

    assert view.notice == CUSTOM_PERIOD_NOTICE
    assert view.summary.total_count == 7
    assert [notice.level for notice in notices] == [NoticeLevel.INFO]
    assert controller.drain_notices() == []


def test_offline_add_updates_view() -> None:
    controller = _controller()
    before = controller.view.summary.total_amount

    view = asyncio.run(
        controller.add_expense(ExpenseCreateRequest(title="Taxi", amount=12, category="transport"))
    )

    assert view.summary.total_count == 8
    assert view.summary.total_amount == before + 12
    assert view.table.items[0].id == 8
    assert controller.drain_notices()[-1].message == "Expense added in offline mode"


def test_offline_delete_updates_view() -> None:
    controller = _controller()

    view = asyncio.run(controller.delete_expense(1))

    assert view.summary.total_count == 6
    assert view.table.total_pages == 2
    assert all(item.id != 1 for item in view.table.items)


def test_load_falls_back_and_reports_offline_mode() -> None:
    controller = _controller()

    view = asyncio.run(controller.load())
    notices = controller.drain_notices()

    assert view.summary.total_count == 10
    assert controller.cache.offline is True
    assert notices[0].message == "Using offline mode with sample data"


def test_load_colours_categories_from_stored_metadata() -> None:
    categories = [
        {"id": 1, "name": "food", "icon": "utensils", "color": "#123456", "budget": 500,
         "spent": 0, "transactions": 0},
        {"id": 2, "name": "transport", "icon": "car", "color": "#abcdef", "budget": 0,
         "spent": 0, "transactions": 0},
    ]
    expenses = [record.model_dump(mode="json") for record in _records()]

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/categories":
            return httpx.Response(200, json=categories)
        return httpx.Response(200, json=expenses)

    controller = _controller(handler)
    view = asyncio.run(controller.load())
    colours = {slice_.category: slice_.color for slice_ in view.categories}

    assert colours["food"] == "#123456"
    assert colours["transport"] == "#abcdef"
    assert colours["fun"].startswith("#")


def test_load_keeps_category_metadata_when_categories_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/categories":
            return httpx.Response(503)
        return httpx.Response(200, json=[record.model_dump(mode="json") for record in _records()])

    api = ExpenseApi("http://testserver/api", transport=httpx.MockTransport(handler))
    controller = ReportController(
        ExpenseCache(api, today=lambda: TODAY),
        category_meta={"food": CategoryMeta(name="food", color="#000000")},
        page_size=5,
        today=lambda: TODAY,
    )
    view = asyncio.run(controller.load())

    assert {slice_.category: slice_.color for slice_ in view.categories}["food"] == "#000000"
