"""Category endpoints: public listing and detail, admin-only creation."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from greenbite.application.commands import CreateCategoryCommand
from greenbite.application.queries import CategoryDetailQuery, ListCategoriesQuery
from greenbite.domain.shared.exceptions import DomainException
from greenbite.presentation.api.dependencies import AdminUser, PublicRepoFactory
from greenbite.presentation.api.errors import internal_error
from greenbite.presentation.api.schemas.catalog import (
    CategoryCreateRequest,
    CategoryDetailResponse,
    CategoryResponse,
)
from greenbite.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List categories")
async def list_categories(factory: PublicRepoFactory) -> list[CategoryResponse]:
    """List all categories ordered by name."""
    query = ListCategoriesQuery.from_factory(factory)
    categories = await query.execute()
    return [CategoryResponse.from_domain(c) for c in categories]


@router.get(
    "/{category_id}",
    summary="Get category with products",
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
async def get_category(
    category_id: UUID,
    factory: PublicRepoFactory,
) -> CategoryDetailResponse:
    query = CategoryDetailQuery.from_factory(factory)
    category = await query.execute(category_id)
    return CategoryDetailResponse.from_domain(category)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {"description": "Category created"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        403: {"model": ErrorResponse, "description": "Admin access required"},
        409: {"model": ErrorResponse, "description": "Category already exists"},
    },
)
async def create_category(
    request: CategoryCreateRequest,
    admin: AdminUser,
    factory: PublicRepoFactory,
) -> CategoryResponse:
    """Create a category. Requires the ADMIN role."""
    command = CreateCategoryCommand.from_factory(factory)
    try:
        category = await command.execute(name=request.name, image=str(request.image))
        await factory.session.commit()
    except DomainException:
        await factory.session.rollback()
        raise
    except Exception as e:
        await factory.session.rollback()
        raise internal_error("create-category", e, email=admin.email) from e

    logger.info("Category created by %s: %s", admin.email, category.name)
    return CategoryResponse.from_domain(category)
