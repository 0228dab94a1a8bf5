"""Ordering domain - placed orders and their items."""

from greenbite.domain.ordering.entities import Order, OrderItem, OrderStatus
from greenbite.domain.ordering.repositories import OrderRepository

__all__ = ["Order", "OrderItem", "OrderRepository", "OrderStatus"]
