"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - HostId wraps str — ids are opaque, never parsed
    - Request locations encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

HostId = NewType("HostId", str)


# ─── Enums ───────────────────────────────────────────────────────

class RequestLocation(str, Enum):
    """Part of the request a validation rule targets."""
    PATH = "path"
    QUERY = "query"
    BODY = "body"


# ─── Constants ───────────────────────────────────────────────────

DEMO_HOST_ID = HostId("demo-1")
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
