"""Remove a line from the current user's cart."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from greenbite.domain.cart.exceptions import CartItemNotFoundError
from greenbite.domain.cart.repositories import CartRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory


class RemoveCartItemCommand:
    def __init__(self, cart_repository: CartRepository):
        self._cart_repo = cart_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RemoveCartItemCommand:
        return cls(cart_repository=factory.cart_repository())

    async def execute(self, item_id: UUID) -> None:
        removed = await self._cart_repo.remove_item(item_id)
        if not removed:
            raise CartItemNotFoundError(item_id)
