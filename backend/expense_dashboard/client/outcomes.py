from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Available(Generic[T]):
    data: T


@dataclass(frozen=True)
class Unavailable:
    """The backend could not be reached or failed on its side (5xx)."""

    reason: str
    status_code: int | None = None


@dataclass(frozen=True)
class Rejected:
    """The backend answered and refused the request (validation, not found)."""

    status_code: int
    message: str


Outcome = Union[Available[T], Unavailable, Rejected]
