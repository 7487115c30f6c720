"""Request Id Middleware — per-request correlation id for logs and responses.

Invariants:
    - Incoming X-Request-Id reused verbatim; otherwise a UUID4 is generated
    - request_id_var set for the whole request, reset after the response
    - Response always echoes X-Request-Id

Design Decisions:
    - HTTP middleware over a dependency: covers error handler logs and 404s
      raised before any route dependency runs
"""

import uuid

from fastapi import FastAPI, Request

from employee_facade.infrastructure.observability import request_id_var

REQUEST_ID_HEADER = "X-Request-Id"


def register_request_id_middleware(app: FastAPI) -> None:
    """Attach the correlation-id middleware to the app."""

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
