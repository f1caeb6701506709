"""Hosts API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a flat {"error": ...} body
    - CORS, security headers and access logging applied to every route
    - Host store initialized on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests and uvicorn share one construction path
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from hosts_api.api.error_handlers import register_error_handlers
from hosts_api.api.middleware import register_middleware
from hosts_api.api.routes import health, hosts
from hosts_api.config import get_settings
from hosts_api.infrastructure.host_store import init_store
from hosts_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(seed=settings.seed_demo_host)
    logger.info("Hosts API started")
    yield
    logger.info("Hosts API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Hosts API", version="1.0.0", lifespan=lifespan)

    register_middleware(app, settings.cors_origins)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(hosts.router)
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hosts_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
