"""Ordering queries."""

from greenbite.application.queries.ordering.list_orders_query import ListOrdersQuery

__all__ = ["ListOrdersQuery"]
