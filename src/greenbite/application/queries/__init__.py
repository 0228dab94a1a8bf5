"""Application queries (read-only use cases)."""

from greenbite.application.queries.cart import CartQuery
from greenbite.application.queries.catalog import (
    CategoryDetailQuery,
    ListCategoriesQuery,
    ListProductsQuery,
    ProductDetailQuery,
)
from greenbite.application.queries.ordering import ListOrdersQuery

__all__ = [
    "CartQuery",
    "CategoryDetailQuery",
    "ListCategoriesQuery",
    "ListOrdersQuery",
    "ListProductsQuery",
    "ProductDetailQuery",
]
