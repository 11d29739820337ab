from console.admin_orders import ADMIN_ORDERS_STRINGS, AdminOrders
from console.api import API_URLS, ApiClient
from console.checkout import CHECKOUT_STRINGS, Checkout
from console.context import AuthContext, AuthState, CartContext, Navigator, SearchContext, Toaster
from console.dashboard import admin_details
from console.hooks import category_links, use_category
from console.product_form import (
    CREATE_PRODUCT_STRINGS,
    UPDATE_PRODUCT_STRINGS,
    CreateProductForm,
    FormState,
    UpdateProductForm,
)
from console.routes import AdminRoute, PrivateRoute

__all__ = [
    "ADMIN_ORDERS_STRINGS",
    "API_URLS",
    "AdminOrders",
    "AdminRoute",
    "ApiClient",
    "AuthContext",
    "AuthState",
    "CHECKOUT_STRINGS",
    "CREATE_PRODUCT_STRINGS",
    "CartContext",
    "Checkout",
    "CreateProductForm",
    "FormState",
    "Navigator",
    "PrivateRoute",
    "SearchContext",
    "Toaster",
    "UPDATE_PRODUCT_STRINGS",
    "UpdateProductForm",
    "admin_details",
    "category_links",
    "use_category",
]
