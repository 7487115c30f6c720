"""Employee Schemas — Pydantic models for employee values and the upstream envelope.

Invariants:
    - Employee is frozen: immutable once decoded from an upstream payload
    - Any Employee field, id included, may be absent upstream (None)
    - CreateEmployeeRequest: name/title stripped and non-blank, salary >= 1, 16 <= age <= 75
    - UpstreamEnvelope.data is the only part of an upstream response the facade keeps

Design Decisions:
    - Aliases match upstream snake_case names (employee_name, employee_salary, ...);
      populate_by_name lets code construct values with short field names
    - Generic envelope over one model per payload shape: list, object, bool and int
      payloads share the same {data, status, error} wrapper
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from employee_facade.core.domain_types import MAX_AGE, MIN_AGE, MIN_SALARY

T = TypeVar("T")


class Employee(BaseModel):
    """Employee record as served by the upstream store."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    name: str | None = Field(None, alias="employee_name")
    salary: int | None = Field(None, alias="employee_salary")
    age: int | None = Field(None, alias="employee_age")
    title: str | None = Field(None, alias="employee_title")
    email: str | None = Field(None, alias="employee_email")


class CreateEmployeeRequest(BaseModel):
    """Create payload — validated before it reaches the service."""
    name: str = Field(min_length=1)
    salary: int = Field(ge=MIN_SALARY)
    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    title: str = Field(min_length=1)

    @field_validator("name", "title")
    @classmethod
    def strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class UpstreamEnvelope(BaseModel, Generic[T]):
    """{data, status, error} wrapper used by every upstream response."""
    data: T | None = None
    status: str | None = None
    error: str | None = None
