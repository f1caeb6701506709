"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Wire names are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from core records: schemas are API contracts, Host is the domain entity
"""
