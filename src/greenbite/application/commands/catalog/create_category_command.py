"""Create a storefront category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from greenbite.domain.catalog.entities import Category
from greenbite.domain.catalog.repositories import CategoryRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, name: str, image: str) -> Category:
        category = Category(name=name, image=image)
        await self._category_repo.save(category)
        logger.info("Category created: %s", category.name)
        return category
