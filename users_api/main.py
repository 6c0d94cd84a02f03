"""Users API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsersApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one UserRegistry per app, created on startup by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app factory plus module-level app: uvicorn imports `app`,
      tests build isolated instances
    - Registry lives on app.state, not in a module global: state is dropped
      with the app and every test gets a fresh one
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import Settings, get_settings
from users_api.core.user_registry import UserRegistry
from users_api.infrastructure.observability import setup_logging
from users_api.version import VERSION

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.registry = UserRegistry()
    logger.info("Users API started")
    yield
    logger.info(
        f"Users API shutting down, discarding {len(app.state.registry)} user(s)",
    )
    app.state.registry = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(title="Users API", version=VERSION, lifespan=lifespan)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health.router)
    application.include_router(users.router)

    register_error_handlers(application)
    return application


app = create_app()
