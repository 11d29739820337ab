"""
Client-wide state for the console.

Components receive these objects explicitly; nothing is looked up globally.
AuthContext and CartContext mirror themselves into a storage mapping the way
the browser app mirrors into localStorage.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from typing import List, MutableMapping, Optional, Tuple

logger = logging.getLogger(__name__)

Storage = MutableMapping[str, str]


@dataclass
class AuthState:
    user: Optional[dict] = None
    token: str = ""


class AuthContext:
    key = "auth"

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage if storage is not None else {}
        self._state = AuthState()
        raw = self.storage.get(self.key)
        if raw:
            data = json.loads(raw)
            self._state = AuthState(user=data.get("user"), token=data.get("token", ""))

    def get(self) -> AuthState:
        return self._state

    def set(self, state: AuthState) -> None:
        self._state = state
        self.storage[self.key] = json.dumps(asdict(state))

    @property
    def token(self) -> str:
        return self._state.token

    def clear(self) -> None:
        self._state = AuthState()
        self.storage.pop(self.key, None)


class CartContext:
    key = "cart"

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage if storage is not None else {}
        raw = self.storage.get(self.key)
        self._items: List[dict] = json.loads(raw) if raw else []

    def get(self) -> List[dict]:
        return list(self._items)

    def set(self, items: List[dict]) -> None:
        self._items = list(items)
        self.storage[self.key] = json.dumps(self._items)

    def add(self, product: dict) -> None:
        self.set(self._items + [product])

    def remove(self, product_id: str) -> None:
        # drops a single entry, a product added twice stays once
        for i, item in enumerate(self._items):
            if item.get("id") == product_id:
                self.set(self._items[:i] + self._items[i + 1:])
                return

    def total(self) -> float:
        return sum(float(item.get("price", 0)) for item in self._items)


@dataclass
class SearchState:
    keyword: str = ""
    results: List[dict] = field(default_factory=list)


class SearchContext:
    def __init__(self):
        self._state = SearchState()

    def get(self) -> SearchState:
        return self._state

    def set(self, state: SearchState) -> None:
        self._state = state


class Toaster:
    """Collects toast notifications."""

    def __init__(self):
        self.toasts: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        logger.info(f"toast: {message}")
        self.toasts.append(("success", message))

    def error(self, message: str) -> None:
        logger.warning(f"toast: {message}")
        self.toasts.append(("error", message))

    def messages(self, kind: str) -> List[str]:
        return [m for k, m in self.toasts if k == kind]


class Navigator:
    def __init__(self, location: str = "/"):
        self.location = location
        self.history: List[str] = [location]

    def navigate(self, path: str) -> None:
        self.location = path
        self.history.append(path)
