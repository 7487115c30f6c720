"""Employee Routes — thin HTTP mapping of the facade operations.

Invariants:
    - Every handler delegates to EmployeeService; no aggregation or resolution here
    - Fixed paths (search, highestSalary, topTen...) registered before /{employee_id}
    - GET /{employee_id} answers 404 when the store reports the employee absent
    - Top-ten names list only named employees: a nameless top earner is skipped
    - Create payload validated by Pydantic before reaching the service

Design Decisions:
    - Paths and names kept from the public employee API contract
      (highestSalary, topTenHighestEarningEmployeeNames) so existing callers work
    - DELETE returns the deleted employee's name, not the id
"""

import logging

from fastapi import APIRouter, Depends

from employee_facade.api.dependencies import get_employee_service
from employee_facade.core.errors import EmployeeNotFoundError, ErrorContext
from employee_facade.schemas.employee import CreateEmployeeRequest, Employee
from employee_facade.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("GET /employees")
    return await service.list_all()


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info(f"GET /employees/search/{search_string}")
    return await service.search_by_name(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("GET /employees/highestSalary")
    return await service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    """Ten best-paid named employees, highest first.

    Employees without a name cannot be listed, so they are skipped and the
    next-ranked named employee takes their place.
    """
    logger.info("GET /employees/topTenHighestEarningEmployeeNames")
    return await service.top_names_by_salary()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info(f"GET /employees/{employee_id}")
    employee = await service.get_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(
            employee_id, context=ErrorContext(operation="get_by_id"),
        )
    return employee


@router.post("", response_model=Employee)
async def create_employee(
    body: CreateEmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info(f"POST /employees name={body.name}")
    return await service.create(body)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete by id; responds with the name that was deleted upstream."""
    logger.info(f"DELETE /employees/{employee_id}")
    return await service.delete_by_id_return_name(employee_id)
