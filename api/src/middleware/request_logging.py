"""
Request logging middleware for FastAPI.

Provides:
- Correlation IDs (taken from X-Correlation-ID or generated)
- request_started / request_completed log entries
- Prometheus request metrics
"""

import time
import uuid
import structlog
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match
from starlette.types import ASGIApp

from shared.logging import bind_context, unbind_context
from shared.metrics import HTTPMetrics

logger = structlog.get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
UNMATCHED_ENDPOINT = "unmatched"


def route_template(request: Request) -> str:
    """
    Get the path template of the route serving a request.

    Metrics are labelled with the template (``/api/v1/users/{record_id}``)
    rather than the concrete path so label values stay bounded.
    """
    partial = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return route.path
        if match == Match.PARTIAL and partial is None:
            partial = route.path
    return partial or UNMATCHED_ENDPOINT


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging and metrics."""

    def __init__(self, app: ASGIApp, metrics: Optional[HTTPMetrics] = None):
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next):
        """Process request and log details."""
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        method = request.method
        path = request.url.path
        endpoint = route_template(request)
        client_ip = request.client.host if request.client else "unknown"

        bind_context(correlation_id=correlation_id)

        if self.metrics is not None:
            self.metrics.requests_in_progress.labels(method=method, endpoint=endpoint).inc()

        start_time = time.perf_counter()

        logger.info(
            "request_started",
            method=method,
            path=path,
            client_ip=client_ip
        )

        try:
            response = await call_next(request)

            duration = time.perf_counter() - start_time

            if self.metrics is not None:
                self.metrics.requests_total.labels(
                    method=method,
                    endpoint=endpoint,
                    status=response.status_code
                ).inc()
                self.metrics.request_duration.labels(
                    method=method,
                    endpoint=endpoint
                ).observe(duration)

            logger.info(
                "request_completed",
                method=method,
                path=path,
                status_code=response.status_code,
                duration=f"{duration:.3f}s"
            )

            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "request_failed",
                method=method,
                path=path,
                error=str(e),
                duration=f"{duration:.3f}s",
                exc_info=True
            )
            raise

        finally:
            if self.metrics is not None:
                self.metrics.requests_in_progress.labels(method=method, endpoint=endpoint).dec()
            unbind_context("correlation_id")
