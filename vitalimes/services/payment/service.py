"""Payment order creation.

Validates the requested amount, converts it to paise, calls the provider once
and maps the outcome into `OrderCreated` or `OrderFailed`.
"""

import asyncio
import time
from typing import Any, Callable

from pydantic import SecretStr

from vitalimes.common.config import CommonSettings
from vitalimes.common.logging import bind_log_context, logger
from vitalimes.common.metrics import (
    payment_failure_total,
    payment_latency_seconds,
    payment_requests_total,
    payment_success_total,
)
from vitalimes.services.payment.amounts import build_receipt, parse_amount, to_minor_units
from vitalimes.services.payment.errors import (
    GENERIC_PROVIDER_MESSAGE,
    ErrorKind,
    InvalidAmountError,
    ProviderTimeoutError,
    describe_provider_error,
)
from vitalimes.services.payment.provider import OrderProvider, RazorpayOrderProvider
from vitalimes.services.payment.schemas import OrderCreated, OrderFailed, OrderResult


class PaymentService:
    """Creates provider orders; holds only immutable configuration."""

    def __init__(
        self,
        provider: OrderProvider,
        key_id: str,
        key_secret: SecretStr | None = None,
        currency: str = "INR",
        receipt_prefix: str = "VTL",
        timeout_seconds: float = 10.0,
        clock: Callable[[], float] = time.time,
        service_name: str = "payment-api",
    ) -> None:
        self.provider = provider
        self.key_id = key_id
        self._key_secret = key_secret
        self.currency = currency
        self.receipt_prefix = receipt_prefix
        self.timeout_seconds = timeout_seconds
        self.clock = clock
        self.service_name = service_name

    @classmethod
    def from_settings(cls, config: CommonSettings, provider: OrderProvider | None = None) -> "PaymentService":
        return cls(
            provider or RazorpayOrderProvider.from_settings(config),
            key_id=config.razorpay_key_id,
            key_secret=config.razorpay_key_secret,
            currency=config.payment_currency,
            receipt_prefix=config.receipt_prefix,
            timeout_seconds=config.razorpay_timeout_seconds,
            service_name=config.service_name,
        )

    def _sanitize(self, message: str) -> str:
        secret = self._key_secret.get_secret_value() if self._key_secret else ""
        if secret and secret in message:
            return GENERIC_PROVIDER_MESSAGE
        return message

    async def _call_provider(self, amount: int, receipt: str) -> Any:
        """Run the blocking SDK call off the event loop under a deadline.

        A timeout or cancellation abandons the worker thread; the provider
        call itself is left to finish since the order may already exist.
        """

        try:
            return await asyncio.wait_for(
                asyncio.to_thread(
                    self.provider.create_order,
                    amount=amount,
                    currency=self.currency,
                    receipt=receipt,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            raise ProviderTimeoutError(self.timeout_seconds) from None

    async def create_order(self, raw_amount: Any) -> OrderResult:
        """Create one provider order for `raw_amount` rupees."""

        payment_requests_total.labels(service=self.service_name).inc()
        try:
            amount = parse_amount(raw_amount)
        except InvalidAmountError as exc:
            logger.info("payment_order_rejected reason=invalid_amount raw_amount=%r", raw_amount)
            payment_failure_total.labels(service=self.service_name, kind=ErrorKind.INVALID_AMOUNT.value).inc()
            return OrderFailed(kind=ErrorKind.INVALID_AMOUNT, error=str(exc), status_code=exc.status_code)

        minor = to_minor_units(amount)
        receipt = build_receipt(self.receipt_prefix, self.clock)
        with bind_log_context(receipt=receipt):
            try:
                with payment_latency_seconds.labels(service=self.service_name).time():
                    order = await self._call_provider(minor, receipt)
            except Exception as exc:
                logger.error(
                    "payment_order_failed amount_minor=%s error_type=%s code=%s http_status=%s detail=%s",
                    minor,
                    type(exc).__name__,
                    getattr(exc, "code", None),
                    getattr(exc, "http_status", None),
                    getattr(exc, "detail", None) or repr(exc),
                )
                payment_failure_total.labels(service=self.service_name, kind=ErrorKind.PROVIDER_FAILURE.value).inc()
                return OrderFailed(
                    kind=ErrorKind.PROVIDER_FAILURE,
                    error=self._sanitize(describe_provider_error(exc)),
                    status_code=500,
                )

            logger.info(
                "payment_order_created amount_minor=%s order_id=%s",
                minor,
                order.get("id") if isinstance(order, dict) else None,
            )
        payment_success_total.labels(service=self.service_name).inc()
        return OrderCreated(order=order, key=self.key_id)
