"""API test fixtures: isolated app + in-process HTTP client.

Invariants:
    - Every test gets a fresh app and a fresh, empty UserRegistry
    - Requests go through the full ASGI stack (middleware, handlers, schemas)

Design Decisions:
    - Registry attached to app.state directly: ASGITransport does not run the
      lifespan, so the fixture does what the lifespan would
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.core.user_registry import UserRegistry
from users_api.main import create_app


@pytest.fixture
def registry():
    return UserRegistry()


@pytest.fixture
def app(registry):
    application = create_app()
    application.state.registry = registry
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
