"""Shared fixtures; seeds credentials before application modules import."""

import os
import threading
import time

os.environ.setdefault("RAZORPAY_KEY_ID", "rzp_test_key")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "test-secret")
os.environ.setdefault("TRACING_ENABLED", "false")

import pytest  # noqa: E402
from pydantic import SecretStr  # noqa: E402

from vitalimes.common.logging import receipt_ctx, trace_id_ctx  # noqa: E402
from vitalimes.services.payment.service import PaymentService  # noqa: E402


FIXED_NOW = 1_700_000_000.5
FIXED_RECEIPT = "VTL-1700000000500"


class FakeProvider:
    """Records `create_order` calls, with the log context seen, and replays a canned outcome."""

    def __init__(self, order=None, error: BaseException | None = None, delay: float = 0.0) -> None:
        self.order = order if order is not None else {"id": "order_test_1", "status": "created"}
        self.error = error
        self.delay = delay
        self.calls: list[dict] = []
        self.seen_context: list[dict] = []
        self.completed = threading.Event()

    def create_order(self, *, amount: int, currency: str, receipt: str):
        self.calls.append({"amount": amount, "currency": currency, "receipt": receipt})
        self.seen_context.append({"trace_id": trace_id_ctx.get(), "receipt": receipt_ctx.get()})
        try:
            if self.delay:
                time.sleep(self.delay)
            if self.error is not None:
                raise self.error
            return self.order
        finally:
            self.completed.set()


def make_service(provider: FakeProvider, timeout_seconds: float = 5.0) -> PaymentService:
    return PaymentService(
        provider,
        key_id="rzp_test_key",
        key_secret=SecretStr("test-secret"),
        timeout_seconds=timeout_seconds,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def service(provider: FakeProvider) -> PaymentService:
    return make_service(provider)
