"""Upstream Result — explicit outcome of one upstream exchange.

Invariants:
    - Exactly one of value / failure is meaningful: ok implies failure is None
    - status_code is the upstream HTTP status when a response was received,
      None for timeouts and transport errors
    - Never crosses the client boundary: public client methods collapse it
      into the sentinel for their return type

Design Decisions:
    - Frozen dataclass over exception channel: the failure kind survives long
      enough to be logged, then becomes an empty/absent/false sentinel
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from employee_facade.core.domain_types import UpstreamFailure

T = TypeVar("T")


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """Value or failure kind from a single upstream call."""
    value: T | None = None
    failure: UpstreamFailure | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T | None, status_code: int) -> "UpstreamResult[T]":
        return cls(value=value, status_code=status_code)

    @classmethod
    def failed(
        cls, failure: UpstreamFailure, status_code: int | None = None,
    ) -> "UpstreamResult[T]":
        return cls(failure=failure, status_code=status_code)

    def value_or(self, default: T) -> T:
        """Return the value, or default on failure or null payload."""
        if not self.ok or self.value is None:
            return default
        return self.value
