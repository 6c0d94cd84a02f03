"""Boundary Protocols: contract between the transport layer and the core.

Invariants:
    - Routes depend on UserStore, never on a concrete registry class
    - Implementations are provided via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, UserRegistry needs no base class
"""

from typing import Protocol, runtime_checkable

from users_api.core.user_record import User, UserCandidate


@runtime_checkable
class UserStore(Protocol):
    """Anything that can list and create users."""
    def list_users(self) -> tuple[User, ...]: ...
    def create_user(self, candidate: UserCandidate) -> User: ...
    def __len__(self) -> int: ...
