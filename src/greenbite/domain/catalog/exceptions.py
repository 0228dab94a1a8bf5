"""Catalog domain exceptions."""

from uuid import UUID

from greenbite.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: UUID | str) -> None:
        super().__init__(
            message="Category not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id)},
        )


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product cannot be found."""

    def __init__(self, product_id: UUID | str) -> None:
        super().__init__(
            message="Product not found",
            code=ErrorCode.PRODUCT_NOT_FOUND,
            details={"product_id": str(product_id)},
        )


class DuplicateCategoryError(ConflictError):
    """Raised when a category with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Category '{name}' already exists",
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name},
        )
