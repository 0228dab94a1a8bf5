"""Read-only category queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, List
from uuid import UUID

from greenbite.domain.catalog.entities import Category
from greenbite.domain.catalog.exceptions import CategoryNotFoundError
from greenbite.domain.catalog.repositories import CategoryRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory


class ListCategoriesQuery:
    """List all categories, ordered by name."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> List[Category]:
        return await self._category_repo.find_all()


class CategoryDetailQuery:
    """Load a single category together with its products."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CategoryDetailQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> Category:
        category = await self._category_repo.find_by_id(
            category_id,
            include_products=True,
        )
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
