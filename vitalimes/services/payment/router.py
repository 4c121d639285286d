"""HTTP routes for payment order creation, mounted under `/api/payment`."""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from vitalimes.services.payment.schemas import (
    CreatePaymentRequest,
    PaymentCreatedResponse,
    PaymentErrorResponse,
)
from vitalimes.services.payment.service import PaymentService


router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_payment_service(request: Request) -> PaymentService:
    """Return the service instance built at startup."""

    return request.app.state.payment_service


async def read_payment_body(request: Request) -> dict[str, Any]:
    """Read a JSON or form body; anything else is treated as `{}`."""

    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@router.get("/test", response_class=PlainTextResponse)
def payment_route_check():
    return "Payment route working"


@router.post(
    "/create-payment",
    response_model=PaymentCreatedResponse,
    responses={400: {"model": PaymentErrorResponse}, 500: {"model": PaymentErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": CreatePaymentRequest.model_json_schema()},
                "application/x-www-form-urlencoded": {"schema": CreatePaymentRequest.model_json_schema()},
            }
        }
    },
)
async def create_payment(request: Request, service: PaymentService = Depends(get_payment_service)):
    """Create a Razorpay order for `amount` rupees.

    Accepts JSON or form bodies. Returns the provider order verbatim plus the
    public key id so the client can open checkout.
    """

    req = CreatePaymentRequest.model_validate(await read_payment_body(request))
    result = await service.create_order(req.amount)
    return JSONResponse(status_code=result.status_code, content=result.envelope())
