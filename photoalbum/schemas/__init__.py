"""Pydantic Schemas - response and request models for API endpoints.

Invariants:
    - Schemas validate at the system boundary (command scripts, API responses)
    - Schemas are built from core values, never the other way round

Design Decisions:
    - Separate from core: schemas are API contracts, core types are domain values
"""
