"""Application commands (state-changing use cases)."""

from greenbite.application.commands.cart import (
    AddToCartCommand,
    RemoveCartItemCommand,
    UpdateCartItemCommand,
)
from greenbite.application.commands.catalog import (
    CreateCategoryCommand,
    CreateProductCommand,
)

__all__ = [
    "AddToCartCommand",
    "CreateCategoryCommand",
    "CreateProductCommand",
    "RemoveCartItemCommand",
    "UpdateCartItemCommand",
]
