"""User Registry: the single owner of the in-memory user collection.

Invariants:
    - Emails are pairwise distinct across all stored records
    - Ids are assigned here only, strictly increasing from 1, never reused
    - Records are kept in insertion order
    - A failed create leaves the collection untouched
    - create_user is atomic with respect to other create_user calls;
      list_users observes either the state before or after any create

Design Decisions:
    - One threading.Lock around validate-plus-insert: the uniqueness check and
      the append can never interleave with another create
    - Explicit id counter instead of len()+1: same values while nothing is
      deleted, and ids stay unique even if removal is ever added
    - Constructed once in the app lifespan and injected into routes: never a
      module-level global
"""

import logging
import threading

from users_api.core.domain_types import UserId, Email
from users_api.core.enforce_user import validate_new_user
from users_api.core.user_record import User, UserCandidate

logger = logging.getLogger(__name__)


class UserRegistry:
    """In-memory, insertion-ordered store of user records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_users(self) -> tuple[User, ...]:
        """Snapshot of all records in creation order."""
        with self._lock:
            return tuple(self._users)

    def create_user(self, candidate: UserCandidate) -> User:
        """Validate and store a new user. Raises UserValidationError."""
        with self._lock:
            error = validate_new_user(candidate, self._users)
            if error:
                logger.info(
                    f"Rejected user: {error.message}",
                    extra={"error_code": error.code, "field": error.field.value},
                )
                raise error
            self._last_id += 1
            user = User(
                id=UserId(self._last_id),
                name=candidate.name,
                email=Email(candidate.email),
            )
            self._users.append(user)
        logger.info("Created user", extra={"user_id": user.id})
        return user
