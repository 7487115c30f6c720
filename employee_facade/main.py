"""Employee Facade API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FacadeError → structured JSON responses
    - One ResilientEmployeeClient per process, built and closed by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Client and service kept on app.state: routes reach them through a
      dependency, tests override the dependency instead of patching modules
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from employee_facade.api.error_handlers import register_error_handlers
from employee_facade.api.request_id import register_request_id_middleware
from employee_facade.api.routes import employees, health
from employee_facade.config import get_settings
from employee_facade.infrastructure.employee_client import ResilientEmployeeClient
from employee_facade.infrastructure.observability import setup_logging
from employee_facade.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = ResilientEmployeeClient(
        settings.employee_api_url,
        timeout_seconds=settings.employee_api_timeout_seconds,
    )
    app.state.employee_client = client
    app.state.employee_service = EmployeeService(client)
    logger.info(f"Employee facade started, upstream={settings.employee_api_url}")
    yield
    await client.aclose()
    logger.info("Employee facade shutting down")


app = FastAPI(
    title="Employee Facade API", version="1.0.0", lifespan=lifespan,
)

register_request_id_middleware(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
