"""Cart domain - per-user shopping carts."""

from greenbite.domain.cart.entities import Cart, CartItem, validate_quantity
from greenbite.domain.cart.exceptions import (
    CartItemNotFoundError,
    CartNotFoundError,
    InvalidQuantityError,
)
from greenbite.domain.cart.repositories import CartRepository

__all__ = [
    "Cart",
    "CartItem",
    "CartItemNotFoundError",
    "CartNotFoundError",
    "CartRepository",
    "InvalidQuantityError",
    "validate_quantity",
]
