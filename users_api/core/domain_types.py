"""Domain Types: rich types that replace bare primitives for user records.

Invariants:
    - UserId wraps int, assigned only by UserRegistry, starts at 1
    - FieldName enumerates every validated field: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
Email = NewType("Email", str)


# ─── Enums ───────────────────────────────────────────────────────

class FieldName(str, Enum):
    """User fields subject to validation, in check order."""
    EMAIL = "email"
    NAME = "name"
