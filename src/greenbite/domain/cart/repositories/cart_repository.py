"""Cart repository interface.

Implementations are scoped to the current user via UserContext, so a
caller can never read or change another user's cart.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from greenbite.domain.cart.entities import Cart


class CartRepository(ABC):
    """Repository interface for the current user's Cart."""

    @abstractmethod
    async def find_for_current_user(self) -> Optional[Cart]:
        """Load the cart with its items and their products, or None."""

    @abstractmethod
    async def get_or_create(self) -> Cart:
        """Return the user's cart (without items), creating it if missing."""

    @abstractmethod
    async def add_item(self, product_id: UUID, quantity: int) -> Cart:
        """
        Add quantity of a product to the user's cart.

        Creates the cart on first use. An existing line for the product is
        incremented in the same statement that would insert it. Returns the
        cart (without items).
        """

    @abstractmethod
    async def update_item_quantity(self, item_id: UUID, quantity: int) -> bool:
        """Set the quantity of a line. Returns False if the line is not ours."""

    @abstractmethod
    async def remove_item(self, item_id: UUID) -> bool:
        """Delete a line. Returns False if the line is not ours."""
