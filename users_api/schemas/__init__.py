"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and types at the system boundary
    - Business rules (required fields, uniqueness) live in core/, not here

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain state
"""
