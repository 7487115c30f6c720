"""Route test fixtures — FastAPI test client over a fake EmployeeStore.

Invariants:
    - get_employee_service overridden: no upstream client, no lifespan needed
    - Overrides and app.state cleaned up after every test

Design Decisions:
    - ASGITransport + httpx.AsyncClient: exercises middleware and error handlers
      exactly as served
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_facade.api.dependencies import get_employee_service
from employee_facade.main import app
from employee_facade.services.employee_service import EmployeeService

from tests.services.fake_store import FakeEmployeeStore


@pytest.fixture
def fake_store():
    return FakeEmployeeStore()


@pytest.fixture
async def client(fake_store):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_employee_service] = (
        lambda: EmployeeService(fake_store)
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    if hasattr(app.state, "employee_client"):
        del app.state.employee_client
