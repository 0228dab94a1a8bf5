"""Change the quantity of a cart line."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from greenbite.domain.cart.exceptions import CartItemNotFoundError
from greenbite.domain.cart.repositories import CartRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory


class UpdateCartItemCommand:
    def __init__(self, cart_repository: CartRepository):
        self._cart_repo = cart_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCartItemCommand:
        return cls(cart_repository=factory.cart_repository())

    async def execute(self, item_id: UUID, quantity: int) -> None:
        updated = await self._cart_repo.update_item_quantity(item_id, quantity)
        if not updated:
            raise CartItemNotFoundError(item_id)
