"""Employee Service — facade operations and the id→name delete resolution.

Invariants:
    - Every read goes upstream: no caching between calls
    - Read/aggregate operations degrade to [] / None / 0, never raise
    - create raises CreationFailedError when the store returns None
    - delete_by_id_return_name: resolve id → name, delete by name, return the name;
      EmployeeNotFoundError when unresolved or nameless, DeleteFailedError when
      the delete reports False; never retries

Design Decisions:
    - Depends on EmployeeStore protocol: tests inject a fake, main.py injects
      ResilientEmployeeClient
    - Aggregations delegated to pure functions in core/employee_queries.py
    - Two-phase delete is not atomic: a rename/delete upstream between the two
      calls goes undetected. Step 1 is read-only so nothing needs rolling back
"""

import logging

from employee_facade.core import employee_queries
from employee_facade.core.domain_types import DEFAULT_TOP_EARNERS
from employee_facade.core.errors import (
    CreationFailedError,
    DeleteFailedError,
    EmployeeNotFoundError,
    ErrorContext,
)
from employee_facade.core.repository_protocols import EmployeeStore
from employee_facade.schemas.employee import CreateEmployeeRequest, Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Facade business operations over an EmployeeStore."""

    def __init__(self, store: EmployeeStore):
        self.store = store

    async def list_all(self) -> list[Employee]:
        return await self.store.fetch_all()

    async def search_by_name(self, fragment: str | None) -> list[Employee]:
        employees = await self.store.fetch_all()
        return employee_queries.search_by_name(employees, fragment)

    async def get_by_id(self, employee_id: str) -> Employee | None:
        return await self.store.fetch_by_id(employee_id)

    async def highest_salary(self) -> int:
        employees = await self.store.fetch_all()
        return employee_queries.highest_salary(employees)

    async def top_names_by_salary(self, n: int = DEFAULT_TOP_EARNERS) -> list[str]:
        employees = await self.store.fetch_all()
        return employee_queries.top_names_by_salary(employees, n)

    async def create(self, request: CreateEmployeeRequest) -> Employee:
        """Create upstream; absence is reported, not passed through."""
        employee = await self.store.create(request)
        if employee is None:
            raise CreationFailedError(
                request.name, context=ErrorContext(operation="create"),
            )
        return employee

    async def delete_by_id_return_name(self, employee_id: str) -> str:
        """Delete the employee behind employee_id and return its name.

        Upstream deletes by name, so the id is resolved first. The returned
        name is what was actually deleted.
        """
        employee = await self.store.fetch_by_id(employee_id)
        if employee is None or not employee.name:
            raise EmployeeNotFoundError(
                employee_id, context=ErrorContext(operation="delete"),
            )

        name = employee.name
        if not await self.store.delete_by_name(name):
            raise DeleteFailedError(
                name,
                context=ErrorContext(operation="delete", employee_id=employee_id),
            )

        logger.info(
            f"Deleted employee id={employee_id} name={name}",
            extra={"employee_id": employee_id, "employee_name": name},
        )
        return name
