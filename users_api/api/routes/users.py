"""Users Routes: list and create users.

Invariants:
    - GET /users returns every record in creation order, [] when empty
    - POST /users returns 201 with an empty body on success
    - POST /users decodes the raw body as JSON whatever the Content-Type
    - Registry failures propagate as UserValidationError → 400 via global handler
    - Undecodable bodies never reach the registry (RequestValidationError → 400)

Design Decisions:
    - No response body on create: clients list to read back ids
    - Raw body over a typed body parameter: FastAPI only parses JSON when the
      Content-Type says so, and `curl -d` sends form-urlencoded
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from users_api.api.dependencies import get_registry
from users_api.core.repository_protocols import UserStore
from users_api.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

_CREATE_BODY_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": UserCreate.model_json_schema()},
        },
    },
}


@router.get("", response_model=list[UserResponse])
async def list_users(registry: UserStore = Depends(get_registry)):
    """List all users."""
    return [UserResponse.from_record(u) for u in registry.list_users()]


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
    openapi_extra=_CREATE_BODY_SCHEMA,
)
async def create_user(
    request: Request, registry: UserStore = Depends(get_registry),
):
    """Create a user from {"name", "email"}."""
    body = await decode_user_create(request)
    registry.create_user(body.to_candidate())
    return Response(status_code=status.HTTP_201_CREATED)


async def decode_user_create(request: Request) -> UserCreate:
    raw = await request.body()
    try:
        return UserCreate.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])}
             for err in e.errors(include_url=False, include_context=False)],
        ) from e
