"""Cart schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from greenbite.domain.cart.entities import Cart
from greenbite.presentation.api.schemas.catalog import ProductResponse


class AddToCartRequest(BaseModel):
    product_id: UUID
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CartItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    quantity: int
    product: ProductResponse | None = None


class CartResponse(BaseModel):
    id: UUID
    user_id: UUID
    items: list[CartItemResponse]
    item_count: int
    total: float

    @classmethod
    def from_domain(cls, cart: Cart) -> CartResponse:
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            items=[
                CartItemResponse(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    product=(
                        ProductResponse.from_domain(item.product)
                        if item.product is not None
                        else None
                    ),
                )
                for item in cart.items
            ],
            item_count=cart.item_count,
            total=float(cart.total),
        )
