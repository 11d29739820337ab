import logging
from typing import Optional

import httpx

from console.api import API_URLS, ApiClient
from console.context import CartContext, Navigator, Toaster

logger = logging.getLogger(__name__)

CHECKOUT_STRINGS = {
    "PAYMENT_COMPLETED": "Payment Completed Successfully",
    "PAYMENT_ERROR": "Something went wrong while processing payment",
}

ORDERS_PAGE = "/dashboard/user/orders"


class Checkout:
    """Cart page: fetch a client token once, then pay with a nonce."""

    def __init__(self, api: ApiClient, cart: CartContext, toaster: Toaster, navigator: Navigator):
        self.api = api
        self.cart = cart
        self.toaster = toaster
        self.navigator = navigator
        self.client_token: Optional[str] = None
        self.loading = False

    def load_token(self) -> None:
        try:
            data = self.api.get(API_URLS["BRAINTREE_TOKEN"]) or {}
            self.client_token = data.get("clientToken")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(e)

    def pay(self, nonce: str) -> bool:
        self.loading = True
        try:
            data = self.api.post(API_URLS["BRAINTREE_PAYMENT"], json={"nonce": nonce, "cart": self.cart.get()})
        except (httpx.HTTPError, ValueError) as e:
            logger.error(e)
            data = None
        finally:
            self.loading = False
        if not (data or {}).get("ok"):
            self.toaster.error(CHECKOUT_STRINGS["PAYMENT_ERROR"])
            return False
        self.cart.set([])
        self.navigator.navigate(ORDERS_PAGE)
        self.toaster.success(CHECKOUT_STRINGS["PAYMENT_COMPLETED"])
        return True
