"""SQLAlchemy implementation of CategoryRepository."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greenbite.domain.catalog.entities import Category
from greenbite.domain.catalog.exceptions import DuplicateCategoryError
from greenbite.domain.catalog.repositories import CategoryRepository
from greenbite.infrastructure.persistence.sqlalchemy.models.catalog import (
    CategoryModel,
)
from greenbite.infrastructure.persistence.sqlalchemy.repositories.catalog.product_repository import (  # NOQA: E501
    category_to_domain,
    product_to_domain,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of the CategoryRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, category: Category) -> None:
        model = CategoryModel(
            id=category.id,
            name=category.name,
            image=category.image,
            created_at=category.created_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DuplicateCategoryError(category.name) from e
        logger.info("Created category: %s (%s)", category.id, category.name)

    async def find_by_id(
        self,
        category_id: UUID,
        include_products: bool = False,
    ) -> Optional[Category]:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id)
        if include_products:
            stmt = stmt.options(selectinload(CategoryModel.products)).execution_options(
                populate_existing=True,
            )

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        products = (
            [product_to_domain(p) for p in model.products] if include_products else None
        )
        return category_to_domain(model, products=products)

    async def find_all(self) -> List[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [category_to_domain(model) for model in result.scalars().all()]

    async def exists(self, category_id: UUID) -> bool:
        stmt = select(CategoryModel.id).where(CategoryModel.id == category_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
