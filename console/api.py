from typing import Any, Optional

import httpx

from console.context import AuthContext

API_URLS = {
    "USER_AUTH": "/api/v1/auth/user-auth",
    "ADMIN_AUTH": "/api/v1/auth/admin-auth",
    "GET_ALL_ORDERS": "/api/v1/auth/all-orders",
    "UPDATE_ORDER_STATUS": "/api/v1/auth/order-status",
    "GET_CATEGORIES": "/api/v1/category/get-category",
    "CREATE_PRODUCT": "/api/v1/product/create-product",
    "GET_PRODUCT": "/api/v1/product/get-product",
    "UPDATE_PRODUCT": "/api/v1/product/update-product",
    "DELETE_PRODUCT": "/api/v1/product/delete-product",
    "GET_PRODUCT_PHOTO": "/api/v1/product/product-photo",
    "BRAINTREE_TOKEN": "/api/v1/product/braintree/token",
    "BRAINTREE_PAYMENT": "/api/v1/product/braintree/payment",
}


class ApiClient:
    """
    Thin JSON client over httpx.

    Every call raises httpx.HTTPStatusError on a non-2xx answer and
    httpx.HTTPError on transport failures. The auth token, when present, is
    sent as the Authorization header.
    """

    def __init__(self, http: httpx.Client, auth: Optional[AuthContext] = None):
        self._http = http
        self._auth = auth

    def _headers(self) -> dict:
        if self._auth is not None and self._auth.token:
            return {"Authorization": self._auth.token}
        return {}

    def _json(self, response: httpx.Response) -> Any:
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    def get(self, url: str) -> Any:
        return self._json(self._http.get(url, headers=self._headers()))

    def post(self, url: str, json: Any = None, data: Optional[dict] = None, files: Optional[dict] = None) -> Any:
        return self._json(self._http.post(url, json=json, data=data, files=files, headers=self._headers()))

    def put(self, url: str, json: Any = None, data: Optional[dict] = None, files: Optional[dict] = None) -> Any:
        return self._json(self._http.put(url, json=json, data=data, files=files, headers=self._headers()))

    def delete(self, url: str) -> Any:
        return self._json(self._http.delete(url, headers=self._headers()))
