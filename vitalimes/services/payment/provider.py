"""Razorpay order API adapter.

Wraps the blocking `razorpay` SDK behind a single `create_order` call and
translates SDK and transport errors into `ProviderError`.
"""

from typing import Any, Protocol

import razorpay
import requests

from vitalimes.common.config import CommonSettings
from vitalimes.services.payment.errors import ProviderError, ProviderTimeoutError


class OrderProvider(Protocol):
    def create_order(self, *, amount: int, currency: str, receipt: str) -> Any:
        ...


class RazorpayOrderProvider:
    """Creates Razorpay orders with a client built once from settings."""

    def __init__(self, client: razorpay.Client, timeout_seconds: float | None = None) -> None:
        self.client = client
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, config: CommonSettings) -> "RazorpayOrderProvider":
        client = razorpay.Client(auth=(config.razorpay_key_id, config.razorpay_key_secret.get_secret_value()))
        return cls(client, timeout_seconds=config.razorpay_timeout_seconds)

    def create_order(self, *, amount: int, currency: str, receipt: str) -> Any:
        data = {"amount": amount, "currency": currency, "receipt": receipt}
        try:
            # Extra kwargs flow through the SDK into requests.
            return self.client.order.create(data=data, timeout=self.timeout_seconds)
        except razorpay.errors.BadRequestError as exc:
            raise ProviderError(str(exc) or None, code="BAD_REQUEST_ERROR", detail=repr(exc), http_status=400) from exc
        except razorpay.errors.GatewayError as exc:
            raise ProviderError(str(exc) or None, code="GATEWAY_ERROR", detail=repr(exc), http_status=502) from exc
        except razorpay.errors.ServerError as exc:
            raise ProviderError(str(exc) or None, code="SERVER_ERROR", detail=repr(exc), http_status=500) from exc
        except requests.Timeout as exc:
            raise ProviderTimeoutError(self.timeout_seconds) from exc
        except requests.RequestException as exc:
            # Transport errors are not provider text; keep them operator-only.
            raise ProviderError(None, code="NETWORK_ERROR", detail=repr(exc)) from exc
