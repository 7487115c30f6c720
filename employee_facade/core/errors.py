"""Error Hierarchy — typed, categorized exceptions for facade failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Upstream transport failures are NOT part of this hierarchy: the client
      absorbs them into sentinels before they reach the service
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FacadeError base: FastAPI global handler catches all
      (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    employee_name: str | None = None
    operation: str | None = None


class FacadeError(Exception):
    """Base exception for all employee facade errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "employee_id": self.context.employee_id,
                    "employee_name": self.context.employee_name,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Resolution Errors (400-level) ──────────────────────────────

class EmployeeNotFoundError(FacadeError):
    """Employee id could not be resolved upstream (absent or nameless)."""
    def __init__(self, employee_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Employee not found for id={employee_id}",
            "EMPLOYEE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.employee_id = employee_id


class DeleteFailedError(FacadeError):
    """Upstream reported the name-keyed delete as not performed."""
    def __init__(self, employee_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_name = employee_name
        super().__init__(
            f"Failed to delete employee name={employee_name}",
            "DELETE_FAILED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.employee_name = employee_name


# ─── Upstream Errors (500-level) ────────────────────────────────

class CreationFailedError(FacadeError):
    """Upstream did not return a created employee."""
    def __init__(self, employee_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_name = employee_name
        super().__init__(
            f"Failed to create employee name={employee_name}",
            "CREATION_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.employee_name = employee_name
