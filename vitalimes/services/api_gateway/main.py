"""Public entrypoint for the storefront payment API.

Wires logging, tracing, the CORS allow-list and request metrics, builds the
payment service once from settings, and mounts its routes under
`/api/payment`.
"""

from time import perf_counter
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from vitalimes.common.config import settings
from vitalimes.common.logging import bind_log_context, configure_logging
from vitalimes.common.metrics import http_request_duration_seconds, http_requests_total, metrics_response
from vitalimes.common.startup import log_startup_config
from vitalimes.common.tracing import instrument_app, setup_tracing
from vitalimes.services.payment.router import router as payment_router
from vitalimes.services.payment.service import PaymentService

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(
    settings,
    [
        "service_name",
        "log_level",
        "razorpay_key_id",
        "razorpay_key_secret",
        "razorpay_timeout_seconds",
        "payment_currency",
        "receipt_prefix",
        "cors_allowed_origins",
        "tracing_enabled",
    ],
)
app = FastAPI(title="Vitalimes Payment API")
instrument_app(app)
app.state.payment_service = PaymentService.from_settings(settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["Authorization"],
)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Bind the trace id and record request count and latency."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    try:
        with bind_log_context(trace_id=request.headers.get("x-correlation-id") or str(uuid4())):
            response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


app.include_router(payment_router, prefix="/api/payment", tags=["Payments"])


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Backend running"


@app.get("/health")
def health():
    """Container health check endpoint."""

    return {"ok": True}


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port, proxy_headers=True, forwarded_allow_ips="*")
