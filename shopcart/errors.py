"""
Cart Errors

Centralized error messages and the exception taxonomy for cart operations.
Every error here is recoverable: the menu reports it and keeps running.
"""

from typing import Optional

# Cart errors
ERROR_INVALID_REQUEST = "Invalid product ID or quantity."
ERROR_NOT_FOUND = "Item not found in cart."
ERROR_EMPTY_CART = "Cart is empty. Cannot proceed to checkout."

# Input errors (menu layer)
ERROR_INVALID_PRODUCT_ID = "Invalid Product ID."
ERROR_INVALID_QUANTITY = "Invalid Quantity."
ERROR_INVALID_CHOICE = "Invalid choice."


class CartError(Exception):
    """Base class for recoverable cart errors."""

    default_message = "Cart operation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        product_id: Optional[int] = None,
        quantity: Optional[int] = None,
    ):
        self.message = message or self.default_message
        self.product_id = product_id
        self.quantity = quantity
        super().__init__(self.message)


class InvalidRequest(CartError):
    """Unknown product id or non-positive quantity on add."""

    default_message = ERROR_INVALID_REQUEST


class NotFound(CartError):
    """Remove of a product that has no line in the cart."""

    default_message = ERROR_NOT_FOUND


class EmptyCart(CartError):
    """Checkout with no lines."""

    default_message = ERROR_EMPTY_CART


__all__ = [
    "ERROR_INVALID_REQUEST",
    "ERROR_NOT_FOUND",
    "ERROR_EMPTY_CART",
    "ERROR_INVALID_PRODUCT_ID",
    "ERROR_INVALID_QUANTITY",
    "ERROR_INVALID_CHOICE",
    "CartError",
    "InvalidRequest",
    "NotFound",
    "EmptyCart",
]
