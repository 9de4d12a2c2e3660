"""
Application entry point.

Creates the FastAPI application and wires together:
- The record store owned by the application
- Routers (one per bounded context)
- Error handlers (centralized failure-to-HTTP mapping)
- Middleware (CORS, security headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.domain.items.ports import RecordStore
from app.infrastructure.items.in_memory_record_store import InMemoryRecordStore
from app.interfaces.health import router as health_router
from app.interfaces.items.router import router as items_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use instead of the environment-loaded ones.
        store: Record store to use. A fresh, empty in-memory store
            is created when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    if settings is None:
        settings = default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.record_store = store if store is not None else InMemoryRecordStore()

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- CORS (outermost, so preflight and 429s carry CORS headers) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app, error_path=settings.error_path)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(items_router, prefix=settings.api_prefix)

    logger.info(
        "Application created: %s %s (api prefix %s)",
        settings.project_name,
        settings.version,
        settings.api_prefix,
    )
    return app


app = create_app()
