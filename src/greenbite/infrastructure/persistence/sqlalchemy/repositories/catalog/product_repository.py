"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from greenbite.domain.catalog.entities import Category, Product
from greenbite.domain.catalog.repositories import ProductRepository
from greenbite.domain.shared.time import ensure_tz_aware
from greenbite.infrastructure.persistence.sqlalchemy.models.catalog import (
    CategoryModel,
    ProductModel,
)

logger = logging.getLogger(__name__)


def category_to_domain(
    model: CategoryModel,
    products: Optional[list[Product]] = None,
) -> Category:
    return Category.reconstitute(
        id=model.id,
        name=model.name,
        image=model.image,
        created_at=ensure_tz_aware(model.created_at),
        products=products,
    )


def product_to_domain(model: ProductModel, include_category: bool = False) -> Product:
    """Map a ProductModel to the domain.

    The category relationship must already be loaded when
    include_category is set.
    """
    category = category_to_domain(model.category) if include_category else None
    return Product.reconstitute(
        id=model.id,
        name=model.name,
        price=model.price,
        image=model.image,
        category_id=model.category_id,
        stock=model.stock,
        description=model.description,
        created_at=ensure_tz_aware(model.created_at),
        category=category,
    )


class ProductRepositorySQLAlchemy(ProductRepository):
    """SQLAlchemy implementation of the ProductRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, product: Product) -> None:
        model = ProductModel(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
            stock=product.stock,
            category_id=product.category_id,
            created_at=product.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Created product: %s (%s)", product.id, product.name)

    async def find_by_id(
        self,
        product_id: UUID,
        include_category: bool = False,
    ) -> Optional[Product]:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        if include_category:
            stmt = stmt.options(joinedload(ProductModel.category)).execution_options(
                populate_existing=True,
            )

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return product_to_domain(model, include_category=include_category)

    async def find_all(self) -> List[Product]:
        stmt = (
            select(ProductModel)
            .options(joinedload(ProductModel.category))
            .order_by(ProductModel.name)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [
            product_to_domain(model, include_category=True)
            for model in result.scalars().all()
        ]

    async def exists(self, product_id: UUID) -> bool:
        stmt = select(ProductModel.id).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
