"""Cart domain exceptions."""

from uuid import UUID

from greenbite.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class CartNotFoundError(EntityNotFoundError):
    """Raised when the current user has no cart yet."""

    def __init__(self, user_id: UUID | str) -> None:
        super().__init__(
            message="Cart not found",
            code=ErrorCode.CART_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class CartItemNotFoundError(EntityNotFoundError):
    """Raised when a cart item does not exist in the current user's cart."""

    def __init__(self, item_id: UUID | str) -> None:
        super().__init__(
            message="Cart item not found",
            code=ErrorCode.CART_ITEM_NOT_FOUND,
            details={"item_id": str(item_id)},
        )


class InvalidQuantityError(ValidationError):
    """Raised when a cart quantity is not a positive integer."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            message="Quantity must be at least 1",
            code=ErrorCode.INVALID_QUANTITY,
            details={"quantity": quantity},
        )
