"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)
    - Wire names are camelCase, Python attributes snake_case
    - Each entity has XCreate (insert), XUpdate (partial) and X (stored record)

Design Decisions:
    - Separate from models/: schemas are API contracts, ORM models are persistence
"""
