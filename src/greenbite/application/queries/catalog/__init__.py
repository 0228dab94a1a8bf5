"""Catalog queries."""

from greenbite.application.queries.catalog.category_queries import (
    CategoryDetailQuery,
    ListCategoriesQuery,
)
from greenbite.application.queries.catalog.product_queries import (
    ListProductsQuery,
    ProductDetailQuery,
)

__all__ = [
    "CategoryDetailQuery",
    "ListCategoriesQuery",
    "ListProductsQuery",
    "ProductDetailQuery",
]
