# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""Catalog repository implementations."""

from greenbite.infrastructure.persistence.sqlalchemy.repositories.catalog.category_repository import (
    CategoryRepositorySQLAlchemy,
)
from greenbite.infrastructure.persistence.sqlalchemy.repositories.catalog.product_repository import (
    ProductRepositorySQLAlchemy,
)

__all__ = ["CategoryRepositorySQLAlchemy", "ProductRepositorySQLAlchemy"]
