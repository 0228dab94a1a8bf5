"""Order history schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from greenbite.domain.ordering.entities import Order


class OrderItemResponse(BaseModel):
    id: UUID
    name: str | None
    quantity: int
    price: float


class OrderResponse(BaseModel):
    id: UUID
    status: str
    total: float
    delivery_address: str
    payment_method: str
    date: str = Field(..., description="Order date (YYYY-MM-DD, UTC)")
    items: list[OrderItemResponse]

    @classmethod
    def from_domain(cls, order: Order) -> OrderResponse:
        return cls(
            id=order.id,
            status=order.status.value,
            total=float(order.total),
            delivery_address=order.delivery_address,
            payment_method=order.payment_method,
            date=order.order_date.isoformat(),
            items=[
                OrderItemResponse(
                    id=item.id,
                    name=item.product_name,
                    quantity=item.quantity,
                    price=float(item.price),
                )
                for item in order.items
            ],
        )


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
