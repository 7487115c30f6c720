"""Boundary Protocols — contract between the facade service and the upstream client.

Invariants:
    - Service NEVER imports the httpx client — dependency arrows point inward only
    - Every method is total: failures arrive as [] / None / False, never as exceptions
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the pure query functions that
      consume the results are never async themselves
"""

from typing import Protocol

from employee_facade.schemas.employee import CreateEmployeeRequest, Employee


class EmployeeStore(Protocol):
    """Contract for the upstream employee store — implemented by the shell."""
    async def fetch_all(self) -> list[Employee]: ...
    async def fetch_by_id(self, employee_id: str) -> Employee | None: ...
    async def create(self, request: CreateEmployeeRequest) -> Employee | None: ...
    async def delete_by_name(self, name: str) -> bool: ...
