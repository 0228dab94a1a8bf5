"""Ordering entities."""

from greenbite.domain.ordering.entities.order import Order, OrderItem
from greenbite.domain.ordering.entities.order_status import OrderStatus

__all__ = ["Order", "OrderItem", "OrderStatus"]
