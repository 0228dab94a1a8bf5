"""Catalog domain - categories and products."""

from greenbite.domain.catalog.entities import Category, Product
from greenbite.domain.catalog.exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    ProductNotFoundError,
)
from greenbite.domain.catalog.repositories import (
    CategoryRepository,
    ProductRepository,
)

__all__ = [
    "Category",
    "CategoryNotFoundError",
    "CategoryRepository",
    "DuplicateCategoryError",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
]
