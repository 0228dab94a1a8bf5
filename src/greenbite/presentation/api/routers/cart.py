"""Cart endpoints for the authenticated user.

The cart always belongs to the user behind the session token; item ids from
another user's cart are reported as not found.
"""

import logging
from uuid import UUID

from fastapi import APIRouter

from greenbite.application.commands import (
    AddToCartCommand,
    RemoveCartItemCommand,
    UpdateCartItemCommand,
)
from greenbite.application.queries import CartQuery
from greenbite.domain.shared.exceptions import DomainException
from greenbite.presentation.api.dependencies import RepoFactory
from greenbite.presentation.api.errors import internal_error
from greenbite.presentation.api.schemas.cart import (
    AddToCartRequest,
    CartResponse,
    UpdateCartItemRequest,
)
from greenbite.presentation.api.schemas.common import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _email(factory: RepoFactory) -> str | None:
    return factory.user_context.email if factory.user_context else None


@router.get(
    "",
    summary="Get cart",
    responses={
        401: {"model": ErrorResponse, "description": "Not signed in"},
        404: {"model": ErrorResponse, "description": "No cart yet"},
    },
)
async def get_cart(factory: RepoFactory) -> CartResponse:
    """Return the cart with its items and their products."""
    query = CartQuery.from_factory(factory)
    cart = await query.execute()
    return CartResponse.from_domain(cart)


@router.post(
    "/add",
    summary="Add product to cart",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid quantity"},
        401: {"model": ErrorResponse, "description": "Not signed in"},
        404: {"model": ErrorResponse, "description": "Product not found"},
    },
)
async def add_to_cart(
    request: AddToCartRequest,
    factory: RepoFactory,
) -> MessageResponse:
    """
    Add a product to the cart.

    The cart is created on first use. Adding a product already in the cart
    increases its quantity.
    """
    command = AddToCartCommand.from_factory(factory)
    try:
        await command.execute(request.product_id, request.quantity)
        await factory.session.commit()
    except DomainException:
        await factory.session.rollback()
        raise
    except Exception as e:
        await factory.session.rollback()
        raise internal_error("add-to-cart", e, email=_email(factory)) from e

    return MessageResponse(message="Item added to cart")


@router.patch(
    "/{item_id}",
    summary="Update item quantity",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid quantity"},
        404: {"model": ErrorResponse, "description": "Cart item not found"},
    },
)
async def update_cart_item(
    item_id: UUID,
    request: UpdateCartItemRequest,
    factory: RepoFactory,
) -> MessageResponse:
    command = UpdateCartItemCommand.from_factory(factory)
    try:
        await command.execute(item_id, request.quantity)
        await factory.session.commit()
    except DomainException:
        await factory.session.rollback()
        raise
    except Exception as e:
        await factory.session.rollback()
        raise internal_error("update-cart-item", e, email=_email(factory)) from e

    return MessageResponse(message="Quantity updated")


@router.delete(
    "/{item_id}",
    summary="Remove item from cart",
    responses={404: {"model": ErrorResponse, "description": "Cart item not found"}},
)
async def remove_cart_item(item_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = RemoveCartItemCommand.from_factory(factory)
    try:
        await command.execute(item_id)
        await factory.session.commit()
    except DomainException:
        await factory.session.rollback()
        raise
    except Exception as e:
        await factory.session.rollback()
        raise internal_error("remove-cart-item", e, email=_email(factory)) from e

    return MessageResponse(message="Item removed")
