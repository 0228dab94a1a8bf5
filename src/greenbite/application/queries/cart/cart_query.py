"""Current user's cart query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from greenbite.domain.cart.entities import Cart
from greenbite.domain.cart.exceptions import CartNotFoundError
from greenbite.domain.cart.repositories import CartRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory
    from greenbite_identity.application.context import UserContext


class CartQuery:
    def __init__(self, cart_repository: CartRepository, user_context: UserContext):
        self._cart_repo = cart_repository
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CartQuery:
        if factory.user_context is None:
            msg = "CartQuery requires an authenticated user context"
            raise RuntimeError(msg)
        return cls(
            cart_repository=factory.cart_repository(),
            user_context=factory.user_context,
        )

    async def execute(self) -> Cart:
        cart = await self._cart_repo.find_for_current_user()
        if cart is None:
            raise CartNotFoundError(self._user_id)
        return cart
