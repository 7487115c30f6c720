"""Route Dependencies — hands the process-wide EmployeeService to route handlers.

Invariants:
    - The service is built once in the lifespan and stored on app.state
    - Routes never construct clients or services themselves

Design Decisions:
    - FastAPI dependency over module global: tests swap it via dependency_overrides
"""

from fastapi import Request

from employee_facade.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service
