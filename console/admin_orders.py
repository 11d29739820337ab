import logging
from typing import List

import httpx

from console.api import API_URLS, ApiClient
from console.context import AuthContext, Toaster

logger = logging.getLogger(__name__)

ADMIN_ORDERS_STRINGS = {
    "FETCH_ORDERS_ERROR": "Something went wrong while fetching orders",
    "UPDATE_STATUS_ERROR": "Something went wrong while updating order status",
}

STATUSES = ["Not Process", "Processing", "Shipped", "Delivered", "Cancelled"]


class AdminOrders:
    """Admin view over every order with a per-order status selector."""

    def __init__(self, api: ApiClient, auth: AuthContext, toaster: Toaster):
        self.api = api
        self.auth = auth
        self.toaster = toaster
        self.orders: List[dict] = []

    def load(self) -> None:
        if not self.auth.token:
            return
        try:
            self.orders = self.api.get(API_URLS["GET_ALL_ORDERS"]) or []
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Order fetch failed: {e}")
            self.toaster.error(ADMIN_ORDERS_STRINGS["FETCH_ORDERS_ERROR"])

    def change_status(self, order_id: str, status: str) -> bool:
        try:
            self.api.put(f"{API_URLS['UPDATE_ORDER_STATUS']}/{order_id}", json={"status": status})
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Status change of order {order_id} to {status!r} failed: {e}")
            self.toaster.error(ADMIN_ORDERS_STRINGS["UPDATE_STATUS_ERROR"])
            return False
        self.load()
        return True
