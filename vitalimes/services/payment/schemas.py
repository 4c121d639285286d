"""Request/response schemas and result values for payment order creation."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from vitalimes.services.payment.errors import ErrorKind


class CreatePaymentRequest(BaseModel):
    """Payload accepted by `POST /api/payment/create-payment`.

    `amount` is left untyped so bad input reaches the service and gets the
    400 envelope instead of a framework 422.
    """

    model_config = ConfigDict(extra="ignore")

    amount: Any = None


class OrderCreated(BaseModel):
    """Provider order, opaque and passed through as returned."""

    order: Any
    key: str
    status_code: int = 200

    def envelope(self) -> dict[str, Any]:
        return {"success": True, "order": self.order, "key": self.key}


class OrderFailed(BaseModel):
    kind: ErrorKind
    error: str
    status_code: int

    def envelope(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}


OrderResult = OrderCreated | OrderFailed


class PaymentCreatedResponse(BaseModel):
    """200 body for a created order."""

    success: Literal[True] = True
    order: Any
    key: str


class PaymentErrorResponse(BaseModel):
    """400/500 body for a rejected or failed order."""

    success: Literal[False] = False
    error: str
