"""
shopcart - in-memory console shopping cart.

Exports the catalog, cart service, and error taxonomy.
"""

from shopcart.cart import CartLine, CartService, CartStore, CartView, Receipt, ShopContext
from shopcart.catalog import Product, ProductCatalog, ProductCategory, default_catalog
from shopcart.errors import CartError, EmptyCart, InvalidRequest, NotFound

__version__ = "1.0.0"

__all__ = [
    "CartLine",
    "CartService",
    "CartStore",
    "CartView",
    "Receipt",
    "ShopContext",
    "Product",
    "ProductCatalog",
    "ProductCategory",
    "default_catalog",
    "CartError",
    "EmptyCart",
    "InvalidRequest",
    "NotFound",
]
