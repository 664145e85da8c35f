"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Create schemas mark required fields; update schemas make every field optional
    - Response schemas are built from Entity Records (from_attributes)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
