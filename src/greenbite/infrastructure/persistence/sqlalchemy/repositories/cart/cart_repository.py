"""SQLAlchemy implementation of CartRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greenbite.domain.cart.entities import Cart, CartItem, validate_quantity
from greenbite.domain.cart.repositories import CartRepository
from greenbite.domain.shared.time import ensure_tz_aware, utc_now
from greenbite.infrastructure.persistence.sqlalchemy.models.cart import (
    CartItemModel,
    CartModel,
)
from greenbite.infrastructure.persistence.sqlalchemy.repositories._utils import (
    upsert_insert,
)
from greenbite.infrastructure.persistence.sqlalchemy.repositories.catalog.product_repository import (  # NOQA: E501
    product_to_domain,
)

if TYPE_CHECKING:
    from greenbite_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class CartRepositorySQLAlchemy(CartRepository):
    """SQLAlchemy implementation of CartRepository, scoped to one user."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    def _own_cart_ids(self):
        return select(CartModel.id).where(CartModel.user_id == self._user_id)

    async def find_for_current_user(self) -> Optional[Cart]:
        # Item quantities change through Core statements, so always reload
        stmt = (
            select(CartModel)
            .where(CartModel.user_id == self._user_id)
            .options(selectinload(CartModel.items).selectinload(CartItemModel.product))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return Cart(
            id=model.id,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
            items=[
                CartItem(
                    id=item.id,
                    cart_id=item.cart_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    product=product_to_domain(item.product),
                )
                for item in model.items
            ],
        )

    async def get_or_create(self) -> Cart:
        now = utc_now()
        insert_stmt = (
            upsert_insert(self._session)(CartModel)
            .values(id=uuid4(), user_id=self._user_id, created_at=now, updated_at=now)
            .on_conflict_do_nothing(index_elements=["user_id"])
        )
        await self._session.execute(insert_stmt)

        stmt = select(CartModel).where(CartModel.user_id == self._user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one()

        return Cart(
            id=model.id,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
        )

    async def add_item(self, product_id: UUID, quantity: int) -> Cart:
        validate_quantity(quantity)
        cart = await self.get_or_create()

        now = utc_now()
        stmt = upsert_insert(self._session)(CartItemModel).values(
            id=uuid4(),
            cart_id=cart.id,
            product_id=product_id,
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["cart_id", "product_id"],
            set_={
                "quantity": CartItemModel.__table__.c.quantity + stmt.excluded.quantity,
                "updated_at": now,
            },
        )
        await self._session.execute(stmt)
        await self._session.flush()

        logger.debug(
            "Added %d x %s to cart %s",
            quantity,
            product_id,
            cart.id,
        )
        return cart

    async def update_item_quantity(self, item_id: UUID, quantity: int) -> bool:
        validate_quantity(quantity)
        stmt = (
            update(CartItemModel)
            .where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id.in_(self._own_cart_ids()),
            )
            .values(quantity=quantity, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return (result.rowcount or 0) > 0  # type: ignore[union-attr]

    async def remove_item(self, item_id: UUID) -> bool:
        stmt = (
            delete(CartItemModel)
            .where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id.in_(self._own_cart_ids()),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return (result.rowcount or 0) > 0  # type: ignore[union-attr]
