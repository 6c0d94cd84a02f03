"""User Record: immutable value types for stored users and creation candidates.

Invariants:
    - User is frozen: a stored record is never mutated after creation
    - UserCandidate carries no id: ids are assigned by the registry only

Design Decisions:
    - Frozen dataclasses over dicts: list_users() can hand out records
      without copying and callers still cannot corrupt registry state
"""

from dataclasses import dataclass

from users_api.core.domain_types import UserId, Email


@dataclass(frozen=True)
class UserCandidate:
    """Decoded create payload, before validation."""
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class User:
    """A stored user record."""
    id: UserId
    name: str
    email: Email
