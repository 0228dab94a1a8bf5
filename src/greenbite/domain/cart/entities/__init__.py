"""Cart entities."""

from greenbite.domain.cart.entities.cart import Cart, CartItem, validate_quantity

__all__ = ["Cart", "CartItem", "validate_quantity"]
