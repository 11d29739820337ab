"""
Braintree gateway adapter.

The SDK reports failures two ways: BraintreeError exceptions and unsuccessful
ErrorResult objects. Both become Err here so the payment routes only ever
branch on Ok/Err. Anything else the SDK raises is not a gateway answer and
propagates to the caller.
"""
import logging
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Optional, Union

import braintree
from braintree.exceptions.braintree_error import BraintreeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Err:
    error: dict


Result = Union[Ok, Err]


def _error_payload(name: str, message: Optional[str]) -> dict:
    return {"name": name, "message": message or ""}


def _settle(call: Callable[[], Any]) -> Result:
    try:
        outcome = call()
    except BraintreeError as e:
        return Err(_error_payload(type(e).__name__, str(e)))
    # client_token.generate returns a bare string, transaction.sale a result object
    if hasattr(outcome, "is_success") and not outcome.is_success:
        return Err(_error_payload("ErrorResult", getattr(outcome, "message", None)))
    return Ok(outcome)


def _transaction_summary(result: Any) -> dict:
    transaction = getattr(result, "transaction", None)
    if transaction is None:
        return {"success": True}
    return {
        "success": True,
        "transaction": {
            "id": transaction.id,
            "status": transaction.status,
            "amount": str(transaction.amount),
        },
    }


class PaymentGateway:
    def __init__(self, gateway: Any):
        self._gateway = gateway

    def generate_client_token(self) -> Result:
        return _settle(lambda: self._gateway.client_token.generate({}))

    def sale(self, amount: Decimal, nonce: str) -> Result:
        result = _settle(lambda: self._gateway.transaction.sale({
            "amount": str(amount),
            "payment_method_nonce": nonce,
            "options": {"submit_for_settlement": True},
        }))
        if isinstance(result, Ok):
            return Ok(_transaction_summary(result.value))
        return result


def build_braintree_gateway() -> braintree.BraintreeGateway:
    environment = os.getenv("BRAINTREE_ENVIRONMENT", "sandbox").lower()
    return braintree.BraintreeGateway(
        braintree.Configuration(
            environment=braintree.Environment.Production if environment == "production" else braintree.Environment.Sandbox,
            merchant_id=os.getenv("BRAINTREE_MERCHANT_ID", ""),
            public_key=os.getenv("BRAINTREE_PUBLIC_KEY", ""),
            private_key=os.getenv("BRAINTREE_PRIVATE_KEY", ""),
        )
    )


_payment_gateway: Optional[PaymentGateway] = None


def get_gateway() -> PaymentGateway:
    """FastAPI dependency; the SDK client is built on first use."""
    global _payment_gateway
    if _payment_gateway is None:
        logger.info("Configuring Braintree gateway")
        _payment_gateway = PaymentGateway(build_braintree_gateway())
    return _payment_gateway
