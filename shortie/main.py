"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- API routes
- Middleware (request logging)
- Error envelopes ({"error": ...}) for framework-level failures
- The code store and shortening service shared by all requests

Design Decisions:
- App factory: each call gets its own store, so tests never share state
- `app` at module level serves `uvicorn shortie.main:app`
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortie.api import endpoints
from shortie.api.schemas import HealthResponse
from shortie.core.setting import Settings, settings
from shortie.middleware.logging import add_logging_middleware
from shortie.services.code_store import CodeStore
from shortie.services.url_service import URLShorteningService

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Shortie, Shortie!\n"

# Liveness answers any method a health checker sends
HEALTH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Body could not be decoded into {"url": <string>}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid json"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail).lower()},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[CodeStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (module settings by default)
        store: Code store to serve from (a fresh empty store by default)

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or settings
    store = store if store is not None else CodeStore()

    app = FastAPI(
        title="Shortie",
        description="A minimal in-memory URL shortening service",
        version="1.0.0",
    )

    app.state.settings = app_settings
    app.state.store = store
    app.state.url_service = URLShorteningService(
        store=store,
        base_url=app_settings.BASE_URL,
        code_length=app_settings.SHORT_CODE_LENGTH,
        max_attempts=app_settings.MAX_COLLISION_ATTEMPTS,
    )

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    add_logging_middleware(app)

    # Health endpoints defined before router to match before catch-all route
    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    def root():
        """Root endpoint, a plain-text greeting."""
        return WELCOME_MESSAGE

    @app.api_route("/healthz", methods=HEALTH_METHODS, response_model=HealthResponse, tags=["Health"])
    def health_check():
        """Liveness check. Does not touch the store."""
        return HealthResponse(ok=True)

    app.include_router(endpoints.router, tags=["URL Shortener"])

    logger.info(f"Shortie app created, short URLs use base {app_settings.BASE_URL}")

    return app


app = create_app()
