"""SQLAlchemy models for the shop persistence layer."""

from greenbite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from greenbite.infrastructure.persistence.sqlalchemy.models.cart import (
    CartItemModel,
    CartModel,
)
from greenbite.infrastructure.persistence.sqlalchemy.models.catalog import (
    CategoryModel,
    ProductModel,
)
from greenbite.infrastructure.persistence.sqlalchemy.models.ordering import (
    OrderItemModel,
    OrderModel,
)

__all__ = [
    "Base",
    "CartItemModel",
    "CartModel",
    "CategoryModel",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
    "TimestampMixin",
]
