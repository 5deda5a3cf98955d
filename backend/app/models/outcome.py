"""Result types returned by the upstream client and the query service.

Callers branch on the type: ``Ok`` carries the value, ``NotFound`` means the
upstream has no such record, ``Failure`` covers transport errors, non-success
statuses and unconfirmed writes. ``Invalid`` is returned before any upstream
call when input fails validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    resource_id: str


@dataclass(frozen=True)
class Failure:
    reason: str
    status_code: int | None = None


@dataclass(frozen=True)
class DeletionNotConfirmed(Failure):
    name: str = ""


@dataclass(frozen=True)
class Invalid:
    errors: list[dict[str, Any]] = field(default_factory=list)
