"""SQLAlchemy models for shopping carts."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greenbite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from greenbite.infrastructure.persistence.sqlalchemy.models.catalog import (
        ProductModel,
    )


class CartModel(Base, TimestampMixin):
    """Database model for carts (one per user)."""

    __tablename__ = "carts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    items: Mapped[list[CartItemModel]] = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.created_at",
    )

    def __repr__(self) -> str:
        return f"<CartModel(id={self.id}, user_id={self.user_id})>"


class CartItemModel(Base, TimestampMixin):
    """Database model for cart lines.

    The (cart_id, product_id) unique constraint is the conflict target for
    the add-to-cart upsert.
    """

    __tablename__ = "cart_items"

    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="uq_cart_items_cart_product"),
        CheckConstraint("quantity >= 1", name="ck_cart_items_quantity_positive"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    cart_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("carts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    cart: Mapped[CartModel] = relationship("CartModel", back_populates="items")
    product: Mapped[ProductModel] = relationship("ProductModel")

    def __repr__(self) -> str:
        return (
            f"<CartItemModel(id={self.id}, product_id={self.product_id}, "
            f"quantity={self.quantity})>"
        )
