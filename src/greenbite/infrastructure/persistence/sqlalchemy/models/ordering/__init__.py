"""Ordering models."""

from greenbite.infrastructure.persistence.sqlalchemy.models.ordering.order_model import (
    OrderItemModel,
    OrderModel,
)

__all__ = ["OrderItemModel", "OrderModel"]
