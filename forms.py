"""
Parsing of the multipart product form.

Every field arrives as a string (or not at all). parse_product_form turns the
raw values into a typed ProductFields or raises ProductFormError carrying the
message the client gets back.
"""
import math
from dataclasses import dataclass
from typing import Optional

from schemas import Photo

PHOTO_MAX_BYTES = 1_000_000
PHOTO_TOO_LARGE = "photo is Required and should be less then 1mb"

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class ProductFormError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass
class ProductFields:
    name: str
    description: str
    price: float
    category: str
    quantity: int
    shipping: Optional[bool] = None
    photo: Optional[Photo] = None


def _required(value: Optional[str], label: str) -> str:
    if value is None or value == "":
        raise ProductFormError(f"{label} is Required")
    return value


def parse_price(value: Optional[str]) -> float:
    raw = _required(value, "Price")
    try:
        price = float(raw)
    except ValueError:
        raise ProductFormError("Price must be a number")
    # nan and inf parse as floats but cannot be stored or encoded as JSON
    if not math.isfinite(price):
        raise ProductFormError("Price must be a number")
    return price


def parse_quantity(value: Optional[str]) -> int:
    raw = _required(value, "Quantity")
    try:
        return int(raw)
    except ValueError:
        try:
            as_float = float(raw)
        except ValueError:
            raise ProductFormError("Quantity must be a whole number")
        if not as_float.is_integer():
            raise ProductFormError("Quantity must be a whole number")
        return int(as_float)


def parse_shipping(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return None


def parse_product_form(
    name: Optional[str] = None,
    description: Optional[str] = None,
    price: Optional[str] = None,
    category: Optional[str] = None,
    quantity: Optional[str] = None,
    shipping: Optional[str] = None,
    photo_data: Optional[bytes] = None,
    photo_type: Optional[str] = None,
) -> ProductFields:
    """Validate in the order name, description, price, category, quantity, photo."""
    fields = ProductFields(
        name=_required(name, "Name"),
        description=_required(description, "Description"),
        price=parse_price(price),
        category=_required(category, "Category"),
        quantity=parse_quantity(quantity),
        shipping=parse_shipping(shipping),
    )
    if photo_data is not None:
        if len(photo_data) > PHOTO_MAX_BYTES:
            raise ProductFormError(PHOTO_TOO_LARGE)
        fields.photo = Photo(data=photo_data, content_type=photo_type or "application/octet-stream")
    return fields
