"""Cart commands."""

from greenbite.application.commands.cart.add_to_cart_command import AddToCartCommand
from greenbite.application.commands.cart.remove_cart_item_command import (
    RemoveCartItemCommand,
)
from greenbite.application.commands.cart.update_cart_item_command import (
    UpdateCartItemCommand,
)

__all__ = ["AddToCartCommand", "RemoveCartItemCommand", "UpdateCartItemCommand"]
