"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Request schemas never expose display_order; only the order manager writes it

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - camelCase aliases on the wire, snake_case in Python
"""
