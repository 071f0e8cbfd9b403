from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from expense_dashboard.client.outcomes import Available, Outcome, Rejected, Unavailable
from expense_dashboard.config import settings
from expense_dashboard.schemas.category import CategoryItem
from expense_dashboard.schemas.expense import (
    ExpenseCreateRequest,
    ExpenseRecord,
    ExpenseUpdateRequest,
)
from expense_dashboard.schemas.statistics import StatisticsResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        return str(payload.get("message") or payload.get("detail") or payload)
    return str(payload)


class ExpenseApi:
    """Async client for the expense REST service.

    Every call returns an outcome instead of raising: ``Available`` with the
    decoded payload, ``Unavailable`` for transport failures and 5xx answers,
    ``Rejected`` when the service refused the request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def __aenter__(self) -> ExpenseApi:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        decode: Callable[[Any], T],
        *,
        json: Any = None,
    ) -> Outcome[T]:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return Unavailable(reason=str(exc) or exc.__class__.__name__)

        if response.status_code >= 500:
            logger.warning("%s %s answered %d", method, path, response.status_code)
            return Unavailable(
                reason=f"Server error {response.status_code}",
                status_code=response.status_code,
            )
        if response.status_code >= 400:
            return Rejected(status_code=response.status_code, message=_error_message(response))

        try:
            return Available(decode(response.json()))
        except (ValueError, ValidationError) as exc:
            logger.warning("%s %s returned an unreadable payload: %s", method, path, exc)
            return Unavailable(reason="Malformed response", status_code=response.status_code)

    async def list_expenses(self) -> Outcome[list[ExpenseRecord]]:
        return await self._request(
            "GET", "/expenses", lambda data: [ExpenseRecord.model_validate(item) for item in data]
        )

    async def get_expense(self, expense_id: int) -> Outcome[ExpenseRecord]:
        return await self._request("GET", f"/expenses/{expense_id}", ExpenseRecord.model_validate)

    async def create_expense(self, draft: ExpenseCreateRequest) -> Outcome[ExpenseRecord]:
        return await self._request(
            "POST",
            "/expenses",
            ExpenseRecord.model_validate,
            json=draft.model_dump(mode="json", exclude_none=True),
        )

    async def update_expense(
        self, expense_id: int, changes: ExpenseUpdateRequest
    ) -> Outcome[ExpenseRecord]:
        return await self._request(
            "PUT",
            f"/expenses/{expense_id}",
            ExpenseRecord.model_validate,
            json=changes.model_dump(mode="json", exclude_none=True),
        )

    async def delete_expense(self, expense_id: int) -> Outcome[ExpenseRecord]:
        return await self._request(
            "DELETE", f"/expenses/{expense_id}", ExpenseRecord.model_validate
        )

    async def statistics(self) -> Outcome[StatisticsResponse]:
        return await self._request("GET", "/statistics", StatisticsResponse.model_validate)

    async def list_categories(self) -> Outcome[list[CategoryItem]]:
        return await self._request(
            "GET", "/categories", lambda data: [CategoryItem.model_validate(item) for item in data]
        )
