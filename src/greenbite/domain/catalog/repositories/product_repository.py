"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from greenbite.domain.catalog.entities import Product


class ProductRepository(ABC):
    """Repository interface for Product entities. Not user-scoped."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    async def find_by_id(
        self,
        product_id: UUID,
        include_category: bool = False,
    ) -> Optional[Product]:
        """Find product by ID, optionally with its category."""

    @abstractmethod
    async def find_all(self) -> List[Product]:
        """Find all products, each with its category."""

    @abstractmethod
    async def exists(self, product_id: UUID) -> bool:
        """Check whether a product exists."""
