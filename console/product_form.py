"""
Admin create/update product forms.

A form moves idle -> editing on mount, editing -> submitting on submit, then
either to done (navigated away) or back to editing with an error toast.
Field values stay as the strings an input would hold; the API does all the
validation.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional, Tuple

import httpx

from console.api import API_URLS, ApiClient
from console.context import Navigator, Toaster

logger = logging.getLogger(__name__)

PRODUCTS_PAGE = "/dashboard/admin/products"

CREATE_PRODUCT_STRINGS = {
    "CREATE_PRODUCT_ACTION": "CREATE PRODUCT",
    "SELECT_CATEGORY_ACTION": "Select a category",
    "UPLOAD_PHOTO_ACTION": "Upload Photo",
    "SELECT_SHIPPING_ACTION": "Select Shipping",
    "FETCH_CATEGORY_ERROR": "Something went wrong in getting category",
    "CREATE_PRODUCT_ERROR": "Something went wrong in creating product",
    "PRODUCT_CREATED": "Product created successfully",
}

UPDATE_PRODUCT_STRINGS = {
    "UPDATE_PRODUCT_ACTION": "UPDATE PRODUCT",
    "DELETE_PRODUCT_ACTION": "DELETE PRODUCT",
    "SELECT_CATEGORY_ACTION": "Select a category",
    "UPLOAD_PHOTO_ACTION": "Upload Photo",
    "SELECT_SHIPPING_ACTION": "Select Shipping",
    "DELETE_PRODUCT_CONFIRM": "Delete Product? Enter any key to confirm. This action is irreversible.",
    "FETCH_PRODUCT_ERROR": "Something went wrong in getting product",
    "FETCH_CATEGORY_ERROR": "Something went wrong in getting category",
    "UPDATE_PRODUCT_ERROR": "Something went wrong in updating product",
    "DELETE_PRODUCT_ERROR": "Something went wrong in deleting product",
    "PRODUCT_UPDATED": "Product updated successfully",
    "PRODUCT_DELETED": "Product deleted successfully",
}

# (filename, content, content type), as httpx expects for a file part
PhotoUpload = Tuple[str, bytes, str]


class FormState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    DONE = "done"


class ProductForm(ABC):
    strings: dict = {}

    def __init__(self, api: ApiClient, toaster: Toaster, navigator: Navigator):
        self.api = api
        self.toaster = toaster
        self.navigator = navigator
        self.state = FormState.IDLE
        self.categories: List[dict] = []
        self.name = ""
        self.description = ""
        self.price = ""
        self.category = ""
        self.quantity = ""
        self.shipping: Optional[bool] = None
        self.photo: Optional[PhotoUpload] = None

    def _load_categories(self) -> None:
        try:
            data = self.api.get(API_URLS["GET_CATEGORIES"])
            if not (data or {}).get("success"):
                raise ValueError("Error in getting category")
            self.categories = data.get("category") or []
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Category fetch failed: {e}")
            self.categories = []
            self.toaster.error(self.strings["FETCH_CATEGORY_ERROR"])

    def mount(self) -> None:
        self._load_categories()
        self.state = FormState.EDITING

    def form_data(self) -> Tuple[dict, Optional[dict]]:
        data = {
            "name": self.name,
            "description": self.description,
            "price": str(self.price),
            "quantity": str(self.quantity),
            "category": self.category,
        }
        if self.shipping is not None:
            data["shipping"] = "true" if self.shipping else "false"
        files = {"photo": self.photo} if self.photo else None
        return data, files

    @abstractmethod
    def _send(self, data: dict, files: Optional[dict]) -> dict:
        """POST or PUT the form to the API."""

    def _submit(self, success_key: str, error_key: str) -> bool:
        self.state = FormState.SUBMITTING
        try:
            result = self._send(*self.form_data())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Product submit failed: {e}")
            result = None
        if result and result.get("success"):
            self.toaster.success(self.strings[success_key])
            self.navigator.navigate(PRODUCTS_PAGE)
            self.state = FormState.DONE
            return True
        self.toaster.error(self.strings[error_key])
        self.state = FormState.EDITING
        return False


class CreateProductForm(ProductForm):
    strings = CREATE_PRODUCT_STRINGS

    def _send(self, data: dict, files: Optional[dict]) -> dict:
        return self.api.post(API_URLS["CREATE_PRODUCT"], data=data, files=files)

    def submit(self) -> bool:
        return self._submit("PRODUCT_CREATED", "CREATE_PRODUCT_ERROR")


class UpdateProductForm(ProductForm):
    strings = UPDATE_PRODUCT_STRINGS

    def __init__(self, api: ApiClient, toaster: Toaster, navigator: Navigator, slug: str):
        super().__init__(api, toaster, navigator)
        self.slug = slug
        self.id = ""

    def _load_product(self) -> None:
        try:
            data = self.api.get(f"{API_URLS['GET_PRODUCT']}/{self.slug}")
            product = data["product"]
            self.id = product["id"]
            self.name = product["name"]
            self.description = product["description"]
            self.price = str(product["price"])
            self.quantity = str(product["quantity"])
            self.shipping = product.get("shipping")
            category = product.get("category")
            self.category = category["id"] if isinstance(category, dict) else (category or "")
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Product fetch for {self.slug!r} failed: {e}")
            self.toaster.error(self.strings["FETCH_PRODUCT_ERROR"])

    def mount(self) -> None:
        self._load_product()
        super().mount()

    @property
    def photo_url(self) -> str:
        return f"{API_URLS['GET_PRODUCT_PHOTO']}/{self.id}"

    def _send(self, data: dict, files: Optional[dict]) -> dict:
        return self.api.put(f"{API_URLS['UPDATE_PRODUCT']}/{self.id}", data=data, files=files)

    def submit(self) -> bool:
        return self._submit("PRODUCT_UPDATED", "UPDATE_PRODUCT_ERROR")

    def delete(self, confirm: Callable[[str], Optional[str]]) -> bool:
        """Delete after confirm(prompt) returns a truthy answer."""
        answer = confirm(self.strings["DELETE_PRODUCT_CONFIRM"])
        if not answer:
            return False
        try:
            self.api.delete(f"{API_URLS['DELETE_PRODUCT']}/{self.id}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Product delete for {self.id} failed: {e}")
            self.toaster.error(self.strings["DELETE_PRODUCT_ERROR"])
            return False
        self.toaster.success(self.strings["PRODUCT_DELETED"])
        self.navigator.navigate(PRODUCTS_PAGE)
        self.state = FormState.DONE
        return True
