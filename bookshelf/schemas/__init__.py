"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate JSON shape at the system boundary
    - Domain values (core.domain_types.Book) never leak ORM objects to routes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
