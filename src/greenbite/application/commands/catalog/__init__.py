"""Catalog commands."""

from greenbite.application.commands.catalog.create_category_command import (
    CreateCategoryCommand,
)
from greenbite.application.commands.catalog.create_product_command import (
    CreateProductCommand,
)

__all__ = ["CreateCategoryCommand", "CreateProductCommand"]
