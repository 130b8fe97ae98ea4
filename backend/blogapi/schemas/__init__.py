"""Pydantic Schemas — request validation at the API boundary.

Invariants:
    - Schemas validate at system boundary (user input, OAuth provider profiles)
    - Separate from models: schemas are API contracts, models are persistence
"""
