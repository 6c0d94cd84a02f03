"""Error Hierarchy: typed, categorized exceptions for all users-api failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level and never fatal to the process
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UsersApiError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from users_api.core.domain_types import FieldName


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None


class UsersApiError(Exception):
    """Base exception for all users-api errors."""

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
                "context": {"path": self.context.path},
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UserValidationError(UsersApiError):
    """Candidate user failed a required-field or uniqueness check."""
    def __init__(
        self,
        message: str,
        field: FieldName,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", category,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class MalformedBodyError(UsersApiError):
    """Request body could not be decoded into a user payload."""
    def __init__(self, problems: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 400,
        )
        self.problems = problems

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.problems
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class RegistryUnavailableError(UsersApiError):
    """Request arrived before the registry was attached to the app."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User registry is not available",
            "REGISTRY_UNAVAILABLE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
