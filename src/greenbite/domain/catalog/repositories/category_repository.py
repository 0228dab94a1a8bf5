"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from greenbite.domain.catalog.entities import Category


class CategoryRepository(ABC):
    """Repository interface for Category entities. Not user-scoped."""

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Persist a new category."""

    @abstractmethod
    async def find_by_id(
        self,
        category_id: UUID,
        include_products: bool = False,
    ) -> Optional[Category]:
        """Find category by ID, optionally with its products."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """Find all categories ordered by name."""

    @abstractmethod
    async def exists(self, category_id: UUID) -> bool:
        """Check whether a category exists."""
