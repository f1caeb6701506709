"""Error Hierarchy — typed, categorized exceptions for all Hosts API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat REST envelope {"error": message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with HostsApiError base: one global handler catches all
    - Validation errors are NOT part of this hierarchy — they travel as
      RequestValidationError so body/query/path rules share one handler
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class HostsApiError(Exception):
    """Base exception for all Hosts API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class HostNotFoundError(HostsApiError):
    """Referenced host id is not in the store."""
    def __init__(self, host_id: str):
        super().__init__(
            "Host not found", "HOST_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.host_id = host_id


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalServiceError(HostsApiError):
    """Unexpected failure inside a handler, surfaced with a generic message."""
    def __init__(self, message: str):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
