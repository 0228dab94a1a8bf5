"""Cart queries."""

from greenbite.application.queries.cart.cart_query import CartQuery

__all__ = ["CartQuery"]
