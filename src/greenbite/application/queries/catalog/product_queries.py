"""Read-only product queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, List
from uuid import UUID

from greenbite.domain.catalog.entities import Product
from greenbite.domain.catalog.exceptions import ProductNotFoundError
from greenbite.domain.catalog.repositories import ProductRepository

if TYPE_CHECKING:
    from greenbite.application.factories import RepositoryFactory


class ListProductsQuery:
    """List all products with their categories."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListProductsQuery:
        return cls(product_repository=factory.product_repository())

    async def execute(self) -> List[Product]:
        return await self._product_repo.find_all()


class ProductDetailQuery:
    """Load a single product, with or without its category."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ProductDetailQuery:
        return cls(product_repository=factory.product_repository())

    async def execute(
        self,
        product_id: UUID,
        include_category: bool = True,
    ) -> Product:
        product = await self._product_repo.find_by_id(
            product_id,
            include_category=include_category,
        )
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
