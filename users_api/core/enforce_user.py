"""User Enforcement: validation rules applied before a user is stored.

Invariants:
    - All functions are PURE: no IO, no locking, no side effects
    - Return the error on violation, None on success
    - validate_new_user chains all checks in fixed order: first error wins:
      email required, name required, email unique

Design Decisions:
    - Return errors (not raise): UserRegistry decides when to raise, so the
      checks stay testable without a registry
    - Emptiness means "" only: whitespace-only values pass, matching the
      behaviour clients already depend on
"""

from collections.abc import Iterable

from users_api.core.domain_types import FieldName
from users_api.core.errors import ErrorCategory, UserValidationError
from users_api.core.user_record import User, UserCandidate


def check_email_present(candidate: UserCandidate) -> UserValidationError | None:
    """Rule 1: email is required."""
    if candidate.email == "":
        return UserValidationError("email is required", FieldName.EMAIL)
    return None


def check_name_present(candidate: UserCandidate) -> UserValidationError | None:
    """Rule 2: name is required."""
    if candidate.name == "":
        return UserValidationError("name is required", FieldName.NAME)
    return None


def check_email_unique(
    candidate: UserCandidate, existing: Iterable[User],
) -> UserValidationError | None:
    """Rule 3: email must not match any stored record (exact, case-sensitive)."""
    if any(user.email == candidate.email for user in existing):
        return UserValidationError(
            "email already exists", FieldName.EMAIL,
            category=ErrorCategory.CONFLICT,
        )
    return None


def validate_new_user(
    candidate: UserCandidate, existing: Iterable[User],
) -> UserValidationError | None:
    """Run all checks in order. Returns the first failure, or None."""
    return (
        check_email_present(candidate)
        or check_name_present(candidate)
        or check_email_unique(candidate, existing)
    )
