"""
Database Schemas for the storefront

Each Pydantic model represents a collection in your MongoDB database.
Collection name is the lowercase of the class name (e.g., Product -> "product").
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

OrderStatus = Literal["Not Process", "Processing", "Shipped", "Delivered", "Cancelled"]


class Category(BaseModel):
    """
    Product category
    Collection: "category"
    """
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL-friendly slug derived from the name")


class Photo(BaseModel):
    data: bytes
    content_type: str = "application/octet-stream"


class Product(BaseModel):
    """
    Product catalog schema
    Collection: "product"
    """
    name: str = Field(..., description="Product name")
    slug: str = Field(..., description="URL-friendly slug derived from the name")
    description: str = Field(..., description="Detailed description")
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., description="Units in stock")
    category: str = Field(..., description="Referenced category _id string")
    shipping: Optional[bool] = Field(None, description="Whether the product ships")
    photo: Optional[Photo] = Field(None, description="Binary photo, at most 1MB")


class User(BaseModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None
    role: Literal["customer", "admin"] = "customer"


class Session(BaseModel):
    user_id: str
    token: str


class CartItem(BaseModel):
    """Snapshot of a product as it sat in the cart at purchase time"""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    price: float = Field(..., description="Unit price at purchase time")


class Order(BaseModel):
    """
    Orders schema
    Collection: "order"
    """
    buyer: str = Field(..., description="Referenced user _id string")
    products: List[Dict[str, Any]] = Field(default_factory=list)
    payment: Dict[str, Any] = Field(default_factory=dict, description="Gateway transaction outcome")
    status: OrderStatus = "Not Process"


# Request bodies

class CategoryRequest(BaseModel):
    name: Optional[str] = None


class FilterRequest(BaseModel):
    checked: List[str] = Field(default_factory=list)
    radio: List[float] = Field(default_factory=list)


class PaymentRequest(BaseModel):
    nonce: str
    cart: List[CartItem] = Field(default_factory=list)


class OrderStatusRequest(BaseModel):
    status: OrderStatus
