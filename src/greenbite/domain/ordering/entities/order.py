"""Order and order item entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from greenbite.domain.ordering.entities.order_status import OrderStatus
from greenbite.domain.shared.time import utc_now


@dataclass
class OrderItem:
    """A purchased product line. Price is captured at purchase time."""

    product_id: UUID
    quantity: int
    price: Decimal
    product_name: Optional[str] = None
    id: UUID = field(default_factory=uuid4)


@dataclass
class Order:
    """A placed order. Orders are read-only once stored."""

    user_id: UUID
    total: Decimal
    delivery_address: str
    payment_method: str
    status: OrderStatus = OrderStatus.PENDING
    items: list[OrderItem] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    @property
    def order_date(self) -> date:
        return self.created_at.date()
