"""Order repository interface.

Implementations are scoped to the current user via UserContext.
"""

from abc import ABC, abstractmethod
from typing import List

from greenbite.domain.ordering.entities import Order


class OrderRepository(ABC):
    """Repository interface for the current user's orders."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist an order with its items."""

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """Find all orders with items and product names, newest first."""
