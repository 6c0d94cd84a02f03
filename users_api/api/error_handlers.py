"""Error Handlers: global exception handlers for the users API.

Invariants:
    - UsersApiError → structured JSON with error code, message, severity
    - RequestValidationError (malformed JSON, wrong types) → 400 with field details
    - Exception (catch-all) → 500, never leaks internal details
    - No handler terminates the process; the next request is served normally

Design Decisions:
    - Three-layer handler: domain (UsersApiError), validation (Pydantic), catch-all
    - Malformed bodies map to 400, not FastAPI's default 422
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from users_api.core.errors import (
    ErrorContext, ErrorSeverity, MalformedBodyError, UsersApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_users_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_users_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        exc.context.path = request.url.path
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(
            level,
            f"UsersApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register body-decoding error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = MalformedBodyError(
            _describe_problems(exc), context=ErrorContext(path=request.url.path),
        )
        logger.warning(
            f"Undecodable body on {request.url.path}: {error.problems}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _describe_problems(exc: RequestValidationError) -> list[dict]:
    """One entry per decoding problem; field paths drop the leading "body"."""
    problems = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if loc and loc[0] == "body":
            loc = loc[1:]
        problems.append({
            "field": ".".join(loc) or None,
            "message": e["msg"],
            "type": e["type"],
        })
    return problems
