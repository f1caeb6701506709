"""Error Handlers — global exception handlers for the Hosts API.

Invariants:
    - HostsApiError → {"error": message} with the error's own HTTP status
    - RequestValidationError → 400 {"error": "VALIDATION_ERROR", "errors": [...]}
    - Starlette HTTPException (unknown route, bad method) → {"error": detail}
    - Exception (catch-all) → never leaks internal details, carries security headers

Design Decisions:
    - Four-layer handler: domain (HostsApiError), validation (Pydantic),
      routing (Starlette), catch-all (Exception)
    - Extracted from main.py so the app factory stays wiring-only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hosts_api.api.middleware import SECURITY_HEADERS
from hosts_api.core.errors import HostsApiError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Hosts API domain/internal error handler."""

    @app.exception_handler(HostsApiError)
    async def hosts_api_error_handler(request: Request, exc: HostsApiError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"HostsApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": VALIDATION_ERROR, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unknown path, 405 bad method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        # Built by ServerErrorMiddleware, outside the header middleware
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
            headers=SECURITY_HEADERS,
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Flatten Pydantic errors into {field, message, value, location} items."""
    return {
        "error": VALIDATION_ERROR,
        "errors": [_flatten_error(e) for e in exc.errors()],
    }


def _flatten_error(error: dict) -> dict:
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else "body"
    field = ".".join(loc[1:]) or location
    # For a missing field Pydantic reports the parent object as input
    value = None if error.get("type") == "missing" else error.get("input")
    return {
        "field": field,
        "message": error.get("msg", "Invalid value"),
        "value": jsonable_encoder(value),
        "location": location,
    }
