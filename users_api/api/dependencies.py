"""Route Dependencies: resolve per-request collaborators from app state.

Invariants:
    - The registry is read from app.state, set once by the lifespan
    - Missing registry surfaces as RegistryUnavailableError (503), never AttributeError

Design Decisions:
    - Dependency function over module global: tests swap the registry through
      app.dependency_overrides
"""

from fastapi import Request

from users_api.core.errors import RegistryUnavailableError
from users_api.core.repository_protocols import UserStore


def get_registry(request: Request) -> UserStore:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise RegistryUnavailableError()
    return registry
