"""Cart package: models, storage, and service."""
from .models import CartLine, CartView, Receipt
from .store import CartStore
from .service import CartService, ShopContext

__all__ = [
    "CartLine",
    "CartView",
    "Receipt",
    "CartStore",
    "CartService",
    "ShopContext",
]
