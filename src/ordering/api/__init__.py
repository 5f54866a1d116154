"""Storefront API package."""

from ordering.api.errors import register_error_handlers
from ordering.api.routes import cart_router, customer_router, order_router, product_router

__all__ = [
    "cart_router",
    "customer_router",
    "order_router",
    "product_router",
    "register_error_handlers",
]
