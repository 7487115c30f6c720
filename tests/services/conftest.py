"""Service test fixtures — fresh fake store and service per test."""

import pytest

from employee_facade.services.employee_service import EmployeeService

from tests.services.fake_store import FakeEmployeeStore


@pytest.fixture
def fake_store():
    return FakeEmployeeStore()


@pytest.fixture
def service(fake_store):
    return EmployeeService(fake_store)
