"""Add a product to the current user's cart."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from greenbite.domain.cart.entities import validate_quantity
from greenbite.domain.cart.repositories import CartRepository
from greenbite.domain.catalog.exceptions import ProductNotFoundError
from greenbite.domain.catalog.repositories import ProductRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AddToCartCommand:
    """
    Add a quantity of a product to the user's cart.

    The cart is created on first use. Adding a product that is already in
    the cart increases its quantity instead of adding a second line.
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        product_repository: ProductRepository,
    ):
        self._cart_repo = cart_repository
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddToCartCommand:
        return cls(
            cart_repository=factory.cart_repository(),
            product_repository=factory.product_repository(),
        )

    async def execute(self, product_id: UUID, quantity: int) -> None:
        validate_quantity(quantity)
        if not await self._product_repo.exists(product_id):
            raise ProductNotFoundError(product_id)

        cart = await self._cart_repo.add_item(product_id, quantity)
        logger.info("Added product %s (x%d) to cart %s", product_id, quantity, cart.id)
