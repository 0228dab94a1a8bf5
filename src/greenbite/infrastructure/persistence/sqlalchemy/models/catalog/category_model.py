"""SQLAlchemy model for catalog categories."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greenbite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from greenbite.infrastructure.persistence.sqlalchemy.models.catalog.product_model import (  # NOQA: E501
        ProductModel,
    )


class CategoryModel(Base, TimestampMixin):
    """Database model for product categories."""

    __tablename__ = "categories"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    image: Mapped[str] = mapped_column(String(2048), nullable=False)

    products: Mapped[list[ProductModel]] = relationship(
        "ProductModel",
        back_populates="category",
        order_by="ProductModel.name",
    )

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"
