"""
Route guards. check() answers "outlet" when the protected page may render and
"spinner" otherwise.
"""
import logging

import httpx

from console.api import API_URLS, ApiClient
from console.context import AuthContext

logger = logging.getLogger(__name__)

SPINNER = "spinner"
OUTLET = "outlet"


class PrivateRoute:
    auth_url = API_URLS["USER_AUTH"]

    def __init__(self, api: ApiClient, auth: AuthContext):
        self.api = api
        self.auth = auth

    def check(self) -> str:
        if not self.auth.token:
            return SPINNER
        try:
            data = self.api.get(self.auth_url) or {}
        except (httpx.HTTPError, ValueError) as e:
            logger.error(e)
            self.auth.clear()
            return SPINNER
        if data.get("ok"):
            return OUTLET
        self.auth.clear()
        return SPINNER


class AdminRoute(PrivateRoute):
    auth_url = API_URLS["ADMIN_AUTH"]
