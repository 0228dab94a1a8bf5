"""Create a product in an existing category."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from greenbite.domain.catalog.entities import Product
from greenbite.domain.catalog.exceptions import (
    CategoryNotFoundError,
    ProductNotFoundError,
)
from greenbite.domain.catalog.repositories import (
    CategoryRepository,
    ProductRepository,
)

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateProductCommand:
    """Validate and create a product, returning it with its category."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self._product_repo = product_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateProductCommand:
        return cls(
            product_repository=factory.product_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # noqa: PLR0913
        self,
        name: str,
        price: Decimal,
        image: str,
        category_id: UUID,
        stock: int,
        description: Optional[str] = None,
    ) -> Product:
        if not await self._category_repo.exists(category_id):
            raise CategoryNotFoundError(category_id)

        product = Product.create(
            name=name,
            price=price,
            image=image,
            category_id=category_id,
            stock=stock,
            description=description,
        )
        await self._product_repo.save(product)
        logger.info("Product created: %s in category %s", product.name, category_id)

        created = await self._product_repo.find_by_id(
            product.id,
            include_category=True,
        )
        if created is None:
            raise ProductNotFoundError(product.id)
        return created
