"""Employee Queries — search, max salary, and top-N ranking over a fetched collection.

Invariants:
    - Pure functions: no IO, no async, input list never mutated
    - search: case-insensitive substring match; None fragment matches everything;
      a missing name is matched as the empty name; upstream order preserved
    - highest_salary: max of non-None salaries, 0 when there is none
    - top_names_by_salary: salary descending, None salary lowest, stable for ties,
      nameless employees skipped, n <= 0 returns []

Design Decisions:
    - Simple substring matching (not fuzzy) — predictable, matches upstream naming
    - sorted(reverse=True) keeps ties in upstream order (Python sort is stable
      in both directions)
"""

from employee_facade.core.domain_types import DEFAULT_TOP_EARNERS
from employee_facade.schemas.employee import Employee


def _salary_rank(employee: Employee) -> tuple[bool, int]:
    """Sort key: any salary outranks a missing one."""
    return (employee.salary is not None, employee.salary or 0)


def search_by_name(
    employees: list[Employee], fragment: str | None,
) -> list[Employee]:
    """Employees whose name contains fragment, ignoring case."""
    needle = (fragment or "").lower()
    return [e for e in employees if needle in (e.name or "").lower()]


def highest_salary(employees: list[Employee]) -> int:
    salaries = [e.salary for e in employees if e.salary is not None]
    return max(salaries, default=0)


def top_names_by_salary(
    employees: list[Employee], n: int = DEFAULT_TOP_EARNERS,
) -> list[str]:
    """Names of the n best-paid employees, highest first."""
    if n <= 0:
        return []
    named = [e for e in employees if e.name]
    ranked = sorted(named, key=_salary_rank, reverse=True)
    return [e.name for e in ranked[:n]]
