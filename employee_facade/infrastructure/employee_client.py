"""Resilient Employee Client — wraps httpx.AsyncClient with timeout and failure normalization.

Invariants:
    - Exactly one upstream request per public call, no retries
    - Whole exchange bounded by timeout_seconds (connect + send + read)
    - Public methods never raise: failures collapse to [] / None / False
    - DELETE 404 is "not deleted" (False, logged at info), not a failure
    - Empty, "." and ".." ids/names are never sent: treated as not found
    - asyncio.CancelledError is not caught: a cancelled caller abandons the call

Design Decisions:
    - Wrapper over raw client: isolates failure policy from the service
    - _exchange returns UpstreamResult: failure kind and status survive until
      logged, then each public method picks its own sentinel
    - Full URLs built per call instead of httpx base_url: base_url merging adds
      a trailing slash the upstream collection route does not accept
"""

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx

from employee_facade.core.domain_types import UpstreamFailure
from employee_facade.core.upstream_result import UpstreamResult
from employee_facade.schemas.employee import (
    CreateEmployeeRequest,
    Employee,
    UpstreamEnvelope,
)

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = UpstreamEnvelope[list[Employee]]
_EMPLOYEE = UpstreamEnvelope[Employee]
_DELETED = UpstreamEnvelope[bool]
_ANY = UpstreamEnvelope[Any]

# Dot segments are collapsed by URL normalization and would address another resource
_UNADDRESSABLE = frozenset({"", ".", ".."})


class ResilientEmployeeClient:
    """Talks to the upstream employee store; a total function over failure."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def aclose(self) -> None:
        """Close the underlying httpx client if this wrapper created it."""
        if self._owns_client:
            await self.client.aclose()

    async def fetch_all(self) -> list[Employee]:
        """GET the whole collection. [] means "could not determine"."""
        result = await self._exchange(
            "fetch_all", "GET", self.base_url, _EMPLOYEE_LIST,
        )
        if not result.ok:
            self._log_failure("fetch_all", result)
            return []
        employees = result.value_or([])
        logger.info(
            f"Fetched {len(employees)} employees",
            extra={"operation": "fetch_all", "count": len(employees)},
        )
        return employees

    async def fetch_by_id(self, employee_id: str) -> Employee | None:
        """GET one employee. Not-found and unreachable both give None."""
        result = await self._exchange(
            "fetch_by_id", "GET", self._url(employee_id), _EMPLOYEE,
        )
        if not result.ok:
            self._log_failure(
                "fetch_by_id", result, employee_id=employee_id,
            )
            return None
        logger.info(
            f"Fetched employee id={employee_id} found={result.value is not None}",
            extra={"operation": "fetch_by_id", "employee_id": employee_id},
        )
        return result.value

    async def create(self, request: CreateEmployeeRequest) -> Employee | None:
        """POST a pre-validated create payload."""
        result = await self._exchange(
            "create", "POST", self.base_url, _EMPLOYEE,
            json=request.model_dump(),
        )
        if not result.ok:
            self._log_failure("create", result, employee_name=request.name)
            return None
        logger.info(
            f"Created employee name={request.name} success={result.value is not None}",
            extra={"operation": "create", "employee_name": request.name},
        )
        return result.value

    async def delete_by_name(self, name: str) -> bool:
        """DELETE /{name} with body {"name": name}; True only on data == true."""
        result = await self._exchange(
            "delete_by_name", "DELETE", self._url(name), _DELETED,
            json={"name": name},
        )
        if not result.ok:
            self._log_failure("delete_by_name", result, employee_name=name)
            return False
        deleted = result.value is True
        logger.info(
            f"Delete name={name} result={deleted}",
            extra={"operation": "delete_by_name", "employee_name": name},
        )
        return deleted

    async def health_check(self) -> bool:
        """Readiness probe: upstream collection answers 2xx in time."""
        result = await self._exchange(
            "health_check", "GET", self.base_url, _ANY,
        )
        if not result.ok:
            self._log_failure("health_check", result)
        return result.ok

    def _url(self, segment: str) -> str | None:
        """Item URL, or None when the segment cannot name a single record."""
        if segment in _UNADDRESSABLE:
            return None
        return f"{self.base_url}/{quote(segment, safe='')}"

    async def _exchange(
        self,
        operation: str,
        method: str,
        url: str | None,
        envelope: type[UpstreamEnvelope],
        *,
        json: dict | None = None,
    ) -> UpstreamResult:
        """Send one request and unwrap its envelope. Never raises."""
        if url is None:
            return UpstreamResult.failed(UpstreamFailure.NOT_FOUND)
        try:
            response = await asyncio.wait_for(
                self.client.request(method, url, json=json),
                timeout=self.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return UpstreamResult.failed(UpstreamFailure.TIMEOUT)
        except httpx.HTTPError as e:
            logger.debug(f"Transport error during {operation}: {e!r}")
            return UpstreamResult.failed(UpstreamFailure.TRANSPORT)
        except Exception as e:
            logger.error(
                f"Unexpected upstream error during {operation}: {e}",
                exc_info=True,
                extra={"operation": operation},
            )
            return UpstreamResult.failed(UpstreamFailure.UNEXPECTED)

        status_code = response.status_code
        if status_code == 404:
            return UpstreamResult.failed(UpstreamFailure.NOT_FOUND, status_code)
        if not response.is_success:
            return UpstreamResult.failed(UpstreamFailure.HTTP_ERROR, status_code)

        try:
            body = envelope.model_validate(response.json())
        except ValueError:
            # json.JSONDecodeError and pydantic.ValidationError both land here
            return UpstreamResult.failed(UpstreamFailure.MALFORMED, status_code)
        return UpstreamResult.success(body.data, status_code)

    def _log_failure(
        self, operation: str, result: UpstreamResult, **fields: str,
    ) -> None:
        """Log a degraded outcome; not-found is expected traffic, not a warning."""
        level = (
            logging.INFO
            if result.failure is UpstreamFailure.NOT_FOUND
            else logging.WARNING
        )
        failure = result.failure.value if result.failure else None
        logger.log(
            level,
            f"Upstream {operation} degraded: failure={failure} status={result.status_code}",
            extra={
                "operation": operation,
                "failure": failure,
                "status_code": result.status_code,
                **fields,
            },
        )
