"""Product endpoints: public listing and detail, admin-only creation."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from greenbite.application.commands import CreateProductCommand
from greenbite.application.queries import ListProductsQuery, ProductDetailQuery
from greenbite.domain.shared.exceptions import DomainException
from greenbite.presentation.api.dependencies import AdminUser, PublicRepoFactory
from greenbite.presentation.api.errors import internal_error
from greenbite.presentation.api.schemas.catalog import (
    ProductCreateRequest,
    ProductResponse,
)
from greenbite.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List products")
async def list_products(factory: PublicRepoFactory) -> list[ProductResponse]:
    """List all products, each with its category."""
    query = ListProductsQuery.from_factory(factory)
    products = await query.execute()
    return [ProductResponse.from_domain(p) for p in products]


@router.get(
    "/{product_id}",
    summary="Get product",
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
async def get_product(product_id: UUID, factory: PublicRepoFactory) -> ProductResponse:
    query = ProductDetailQuery.from_factory(factory)
    product = await query.execute(product_id, include_category=True)
    return ProductResponse.from_domain(product)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    responses={
        201: {"description": "Product created"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        403: {"model": ErrorResponse, "description": "Admin access required"},
        404: {"model": ErrorResponse, "description": "Category not found"},
    },
)
async def create_product(
    request: ProductCreateRequest,
    admin: AdminUser,
    factory: PublicRepoFactory,
) -> ProductResponse:
    """
    Create a product in an existing category. Requires the ADMIN role.

    Price must be positive and stock must be a positive whole number.
    """
    command = CreateProductCommand.from_factory(factory)
    try:
        product = await command.execute(
            name=request.name,
            price=request.price,
            image=str(request.image),
            category_id=request.category_id,
            stock=request.stock,
            description=request.description,
        )
        await factory.session.commit()
    except DomainException:
        await factory.session.rollback()
        raise
    except Exception as e:
        await factory.session.rollback()
        raise internal_error("create-product", e, email=admin.email) from e

    logger.info("Product created by %s: %s", admin.email, product.name)
    return ProductResponse.from_domain(product)
