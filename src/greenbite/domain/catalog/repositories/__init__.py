"""Catalog repository interfaces."""

from greenbite.domain.catalog.repositories.category_repository import (
    CategoryRepository,
)
from greenbite.domain.catalog.repositories.product_repository import (
    ProductRepository,
)

__all__ = ["CategoryRepository", "ProductRepository"]
