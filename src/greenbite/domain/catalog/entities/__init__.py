"""Catalog entities."""

from greenbite.domain.catalog.entities.category import Category
from greenbite.domain.catalog.entities.product import Product

__all__ = ["Category", "Product"]
