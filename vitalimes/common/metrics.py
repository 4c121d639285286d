"""Prometheus metric definitions for the payment API."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


payment_requests_total = Counter("payment_requests_total", "Total payment order requests", ["service"])
payment_success_total = Counter("payment_success_total", "Total payment orders created", ["service"])
payment_failure_total = Counter(
    "payment_failure_total",
    "Total payment order requests that failed",
    ["service", "kind"],
)
payment_latency_seconds = Histogram(
    "payment_latency_seconds",
    "Provider order creation latency seconds",
    ["service"],
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
