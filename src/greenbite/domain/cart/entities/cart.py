"""Cart and cart item entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from greenbite.domain.cart.exceptions import InvalidQuantityError
from greenbite.domain.catalog.entities import Product


def validate_quantity(quantity: int) -> int:
    if quantity < 1:
        raise InvalidQuantityError(quantity)
    return quantity


@dataclass
class CartItem:
    """One product line in a cart. A cart holds at most one line per product."""

    id: UUID
    cart_id: UUID
    product_id: UUID
    quantity: int
    product: Optional[Product] = None

    @property
    def subtotal(self) -> Decimal:
        if self.product is None:
            return Decimal(0)
        return self.product.price * self.quantity


@dataclass
class Cart:
    """A user's shopping cart. Each user has at most one."""

    id: UUID
    user_id: UUID
    created_at: datetime
    items: list[CartItem] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal(0))

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def find_item(self, item_id: UUID) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == item_id), None)
