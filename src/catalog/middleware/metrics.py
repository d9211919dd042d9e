"""Prometheus metrics middleware for request and mutation monitoring."""
import time
from contextlib import contextmanager
from typing import Callable, Iterator

from prometheus_client import Counter, Gauge, Histogram, generate_latest
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog.core.exceptions import AppError


# =============================================================================
# Prometheus Metrics Definitions
# =============================================================================

# Request metrics
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_requests_active",
    "Number of active HTTP requests",
)

# Product-specific metrics
PRODUCT_MUTATIONS = Counter(
    "product_mutations_total",
    "Product create/update/delete attempts",
    ["operation", "outcome"],  # outcome: success, not_found, error
)


# =============================================================================
# Metrics Middleware
# =============================================================================

class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics for all HTTP requests."""

    def __init__(self, app, api_prefix: str = "/api/v1"):
        super().__init__(app)
        self.products_path = f"{api_prefix}/products"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip metrics endpoint to avoid recursion
        if request.url.path == "/metrics":
            return await call_next(request)

        ACTIVE_REQUESTS.inc()
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            ACTIVE_REQUESTS.dec()
            latency = time.perf_counter() - start_time

            endpoint = self._normalize_endpoint(request.url.path)

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code,
            ).inc()

            REQUEST_LATENCY.labels(
                method=request.method,
                endpoint=endpoint,
            ).observe(latency)

        return response

    def _normalize_endpoint(self, path: str) -> str:
        """Collapse product ids so each route is one label value."""
        if path.rstrip("/") == self.products_path:
            return self.products_path
        if path.startswith(f"{self.products_path}/"):
            return f"{self.products_path}/{{id}}"

        # Keep health and metrics as-is
        if path in ("/health", "/metrics"):
            return path

        return "/other"


# =============================================================================
# Metrics Endpoint
# =============================================================================

async def metrics_endpoint(request: Request) -> Response:
    """Prometheus metrics scrape endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


# =============================================================================
# Helpers for Manual Metric Recording
# =============================================================================

@contextmanager
def record_product_mutation(operation: str) -> Iterator[None]:
    """Count one product mutation, labelled by how it ended."""
    try:
        yield
    except AppError as e:
        outcome = "not_found" if e.status_code == 404 else "error"
        PRODUCT_MUTATIONS.labels(operation=operation, outcome=outcome).inc()
        raise
    except Exception:
        PRODUCT_MUTATIONS.labels(operation=operation, outcome="error").inc()
        raise
    PRODUCT_MUTATIONS.labels(operation=operation, outcome="success").inc()
