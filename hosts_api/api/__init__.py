"""API Layer — FastAPI routes, request rules, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON, except DELETE (204, empty body)

Design Decisions:
    - Thin routes delegate record building/merging to core.host_records
"""
