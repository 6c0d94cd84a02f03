"""User Schemas: wire shapes for the /users routes.

Invariants:
    - UserCreate.name / UserCreate.email default to "" so a missing or null
      field reaches the registry and gets its "... is required" message
    - Keys match case-insensitively ("Email" fills email); the last matching
      key in the object wins
    - A top-level JSON null decodes as an empty object
    - Unknown keys (including a client-supplied id) are ignored
    - UserResponse is exactly {"id", "name", "email"}

Design Decisions:
    - No min_length on UserCreate: emptiness is a registry rule with a fixed
      message and check order, not a schema error
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from users_api.core.user_record import User, UserCandidate


class UserCreate(BaseModel):
    """POST /users body."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in cls.model_fields:
                folded[key.lower()] = value
        return folded

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_candidate(self) -> UserCandidate:
        return UserCandidate(name=self.name, email=self.email)


class UserResponse(BaseModel):
    """Public-facing user record."""
    id: int
    name: str
    email: str

    @classmethod
    def from_record(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)
