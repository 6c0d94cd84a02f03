"""Core Layer: user records, validation rules, and the registry.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Validation checks are pure; only UserRegistry holds mutable state

Design Decisions:
    - Functional core separated from imperative shell: routes decode and encode,
      core decides
"""
