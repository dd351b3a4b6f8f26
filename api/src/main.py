"""
FastAPI application entry point for the Task Tracker API.

This module provides the application factory and process entry point with:
- Users, tasks and readiness routers under the versioned prefix
- Interactive API documentation under {prefix}/swagger
- Request logging, correlation IDs and Prometheus metrics
- Uniform JSON error bodies
"""

import structlog
import uvicorn
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.src.config import Settings, get_settings
from api.src.middleware import RequestLoggingMiddleware
from api.src.repositories.memory_store import RecordStore
from api.src.responses import IndentedJSONResponse, error_response
from api.src.routers import health, tasks, users
from shared.logging import configure_logging
from shared.metrics import HTTPMetrics, get_metrics_handler

logger = structlog.get_logger(__name__)


# ============================================================================
# Lifespan Management
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the application."""
    settings: Settings = app.state.settings
    store: RecordStore = app.state.store

    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        users=len(store.users),
        tasks=len(store.tasks)
    )

    yield

    logger.info(
        "application_shutdown_complete",
        users=len(store.users),
        tasks=len(store.tasks)
    )


# ============================================================================
# Exception Handlers
# ============================================================================

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject invalid or malformed request bodies without field details."""
    logger.warning(
        "validation_error",
        path=request.url.path,
        errors=exc.errors()
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP exceptions in the standard error body."""
    logger.info(
        "http_exception",
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.detail
    )
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(
        "unexpected_exception",
        path=request.url.path,
        error=str(exc),
        exc_info=True
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# ============================================================================
# Application Factory
# ============================================================================

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        store: Record store to serve, defaults to a fresh store (seeded
            unless ``settings.seed_data`` is off)

    Returns:
        Configured application
    """
    settings = settings or get_settings()
    if store is None:
        store = RecordStore.seeded() if settings.seed_data else RecordStore()

    docs_prefix = settings.docs_prefix

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        docs_url=f"{docs_prefix}/index.html",
        redoc_url=None,
        openapi_url=f"{docs_prefix}/doc.json",
        default_response_class=IndentedJSONResponse,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.metrics = HTTPMetrics() if settings.metrics_enabled else None

    # Middleware
    if settings.cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
        )

    app.add_middleware(RequestLoggingMiddleware, metrics=app.state.metrics)

    # Exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(tasks.router, prefix=settings.api_prefix)

    # Documentation browser entry points
    async def swagger_redirect() -> RedirectResponse:
        return RedirectResponse(url=f"{docs_prefix}/index.html")

    for path in (docs_prefix, f"{docs_prefix}/"):
        app.add_api_route(path, swagger_redirect, methods=["GET"], include_in_schema=False)

    # Metrics
    if app.state.metrics is not None:
        render_metrics = get_metrics_handler(app.state.metrics)

        async def metrics() -> Response:
            return Response(content=render_metrics(), media_type=CONTENT_TYPE_LATEST)

        app.add_api_route(settings.metrics_endpoint, metrics, methods=["GET"], include_in_schema=False)

    return app


# ============================================================================
# Application Entry Point
# ============================================================================

def run() -> None:
    """Configure logging and serve the application with uvicorn."""
    settings = get_settings()

    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.log_format == "json",
        service_name=settings.app_name,
        environment=settings.environment,
    )

    logger.info(
        "starting_uvicorn_server",
        host=settings.host,
        port=settings.port
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    run()
