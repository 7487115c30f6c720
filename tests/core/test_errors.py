"""Error hierarchy tests — codes, HTTP statuses, and REST envelope shape."""

from employee_facade.core.errors import (
    CreationFailedError,
    DeleteFailedError,
    EmployeeNotFoundError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    FacadeError,
)


def test_not_found_maps_to_404():
    err = EmployeeNotFoundError("id-1")
    assert isinstance(err, FacadeError)
    assert err.http_status == 404
    assert err.code == "EMPLOYEE_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert "id-1" in err.message


def test_delete_failed_maps_to_409():
    err = DeleteFailedError("Bill Bob")
    assert err.http_status == 409
    assert err.code == "DELETE_FAILED"
    assert err.context.employee_name == "Bill Bob"


def test_creation_failed_is_critical_upstream_error():
    err = CreationFailedError("Jill")
    assert err.http_status == 502
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.severity is ErrorSeverity.CRITICAL


def test_to_response_envelope():
    err = EmployeeNotFoundError(
        "id-7", context=ErrorContext(operation="delete"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "EMPLOYEE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"] == {
        "employee_id": "id-7", "employee_name": None, "operation": "delete",
    }
    assert "timestamp" in body


def test_default_context_created_per_error():
    a = DeleteFailedError("A")
    b = DeleteFailedError("B")
    assert a.context is not b.context
