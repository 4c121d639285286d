"""Payment order error taxonomy."""

from enum import Enum


INVALID_AMOUNT_MESSAGE = "Invalid amount"
GENERIC_PROVIDER_MESSAGE = "Payment order could not be created"
PROVIDER_TIMEOUT_MESSAGE = "Payment provider timed out"


class ErrorKind(str, Enum):
    """Failure kinds surfaced in `OrderFailed` and metric labels."""

    INVALID_AMOUNT = "INVALID_AMOUNT"
    PROVIDER_FAILURE = "PROVIDER_FAILURE"


class PaymentServiceError(Exception):
    """Base exception for payment order errors."""


class InvalidAmountError(PaymentServiceError):
    """Raised when the requested amount is not a finite positive number."""

    status_code = 400

    def __init__(self, raw_amount=None) -> None:
        self.raw_amount = raw_amount
        super().__init__(INVALID_AMOUNT_MESSAGE)


class ProviderError(PaymentServiceError):
    """Raised when the payment provider rejects or fails an order creation.

    `description` is the provider's user-facing text when it sent one.
    `detail` is operator-only diagnostics and is never shown to clients.
    """

    status_code = 500

    def __init__(
        self,
        description: str | None = None,
        code: str = "PROVIDER_ERROR",
        detail: str | None = None,
        http_status: int | None = None,
    ) -> None:
        self.description = description
        self.code = code
        self.detail = detail
        self.http_status = http_status
        super().__init__(description or "")


class ProviderTimeoutError(ProviderError):
    def __init__(self, timeout_seconds: float | None = None) -> None:
        super().__init__(
            PROVIDER_TIMEOUT_MESSAGE,
            code="TIMEOUT",
            detail=f"no response within {timeout_seconds}s" if timeout_seconds else None,
        )


def describe_provider_error(exc: BaseException) -> str:
    """Pick the client-facing text for a provider failure.

    Order: structured `description`, then an `error` body's `description`,
    then the exception message, then a fixed generic string.
    """

    description = getattr(exc, "description", None)
    if not description:
        body = getattr(exc, "error", None)
        if isinstance(body, dict):
            description = body.get("description")
    if not description:
        description = str(exc)
    description = str(description).strip() if description is not None else ""
    return description or GENERIC_PROVIDER_MESSAGE
