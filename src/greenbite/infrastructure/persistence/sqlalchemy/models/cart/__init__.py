"""Cart models."""

from greenbite.infrastructure.persistence.sqlalchemy.models.cart.cart_model import (
    CartItemModel,
    CartModel,
)

__all__ = ["CartItemModel", "CartModel"]
