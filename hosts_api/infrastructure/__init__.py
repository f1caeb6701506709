"""Infrastructure Layer — process-local state and cross-cutting concerns.

Invariants:
    - Infrastructure holds state and wiring, never request/response logic
    - The host store is the only mutable shared state in the process

Design Decisions:
    - Store exposed through a dependency function, not imported directly by routes
"""
