"""Error hierarchy: envelope shape and status codes."""

from users_api.core.domain_types import FieldName
from users_api.core.errors import (
    ErrorCategory, ErrorContext, MalformedBodyError, RegistryUnavailableError,
    UserValidationError,
)


def test_user_validation_error_is_400():
    error = UserValidationError("name is required", FieldName.NAME)
    assert error.http_status == 400
    assert error.code == "VALIDATION_ERROR"
    assert error.category == ErrorCategory.VALIDATION
    assert str(error) == "name is required"


def test_to_response_envelope():
    error = UserValidationError(
        "email is required", FieldName.EMAIL,
        context=ErrorContext(path="/users"),
    )
    body = error.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "email is required"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"] == {"path": "/users"}
    assert "timestamp" in body


def test_registry_unavailable_is_critical_503():
    error = RegistryUnavailableError()
    assert error.http_status == 503
    assert error.to_response()["error"]["severity"] == "critical"


def test_malformed_body_error_carries_details():
    problems = [{"field": "name", "message": "bad", "type": "string_type"}]
    body = MalformedBodyError(problems).to_response()["error"]
    assert body["message"] == "Invalid request data"
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == problems
