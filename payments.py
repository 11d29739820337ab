"""
Payment relay: client token and sale through the Braintree adapter.

A gateway Err is answered with a 500 carrying the error payload. An exception
escaping the adapter is only logged and the client gets an empty 204.
"""
import logging
from decimal import Decimal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from pymongo.database import Database

from auth import require_sign_in
from database import create_document, get_db
from gateway import Err, PaymentGateway, get_gateway
from helpers import failure
from schemas import Order, PaymentRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/product/braintree", tags=["payment"])


def cart_total(cart) -> Decimal:
    total = sum((Decimal(str(item.price)) for item in cart), Decimal("0"))
    return total.quantize(Decimal("0.01"))


@router.get("/token")
def braintree_token(gateway: PaymentGateway = Depends(get_gateway)):
    try:
        result = gateway.generate_client_token()
    except Exception:
        logger.exception("Braintree client token generation raised")
        return Response(status_code=204)
    if isinstance(result, Err):
        return JSONResponse(status_code=500, content=result.error)
    return {"clientToken": result.value}


@router.post("/payment")
def braintree_payment(
    payload: PaymentRequest,
    user: dict = Depends(require_sign_in),
    database: Database = Depends(get_db),
    gateway: PaymentGateway = Depends(get_gateway),
):
    amount = cart_total(payload.cart)
    try:
        result = gateway.sale(amount, payload.nonce)
    except Exception:
        logger.exception(f"Braintree sale of {amount} raised")
        return Response(status_code=204)
    if isinstance(result, Err):
        logger.warning(f"Braintree sale of {amount} declined: {result.error.get('message')}")
        return JSONResponse(status_code=500, content=result.error)

    try:
        order = Order(
            buyer=str(user["_id"]),
            products=[item.model_dump(exclude_none=True) for item in payload.cart],
            payment=result.value,
        )
        order_id = create_document(database, "order", order)
    except Exception as e:
        logger.exception(f"Payment of {amount} succeeded but the order was not saved")
        return failure("Error while saving order", e)
    logger.info(f"order created: {order_id} ({amount})")
    return {"ok": True}
