"""Single product lookup without the category embedded."""

from uuid import UUID

from fastapi import APIRouter

from greenbite.application.queries import ProductDetailQuery
from greenbite.presentation.api.dependencies import PublicRepoFactory
from greenbite.presentation.api.schemas.catalog import ProductResponse
from greenbite.presentation.api.schemas.common import ErrorResponse

router = APIRouter()


@router.get(
    "/{product_id}",
    summary="Get product details",
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
async def get_product_details(
    product_id: UUID,
    factory: PublicRepoFactory,
) -> ProductResponse:
    query = ProductDetailQuery.from_factory(factory)
    product = await query.execute(product_id, include_category=False)
    return ProductResponse.from_domain(product)
