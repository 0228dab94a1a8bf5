# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""Catalog models."""

from greenbite.infrastructure.persistence.sqlalchemy.models.catalog.category_model import (
    CategoryModel,
)
from greenbite.infrastructure.persistence.sqlalchemy.models.catalog.product_model import (
    ProductModel,
)

__all__ = ["CategoryModel", "ProductModel"]
