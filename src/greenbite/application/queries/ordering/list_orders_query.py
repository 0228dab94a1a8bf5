"""Order history query."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from greenbite.domain.ordering.entities import Order
from greenbite.domain.ordering.repositories import OrderRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory


class ListOrdersQuery:
    """List the current user's orders, newest first."""

    def __init__(self, order_repository: OrderRepository):
        self._order_repo = order_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOrdersQuery:
        return cls(order_repository=factory.order_repository())

    async def execute(self) -> List[Order]:
        return await self._order_repo.find_all()
