"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greenbite.domain.ordering.entities import Order, OrderItem, OrderStatus
from greenbite.domain.ordering.repositories import OrderRepository
from greenbite.domain.shared.time import ensure_tz_aware
from greenbite.infrastructure.persistence.sqlalchemy.models.ordering import (
    OrderItemModel,
    OrderModel,
)

if TYPE_CHECKING:
    from greenbite_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class OrderRepositorySQLAlchemy(OrderRepository):
    """SQLAlchemy implementation of OrderRepository, scoped to one user."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, order: Order) -> None:
        if order.user_id != self._user_id:
            msg = "Order belongs to a different user"
            raise ValueError(msg)

        model = OrderModel(
            id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            total=order.total,
            delivery_address=order.delivery_address,
            payment_method=order.payment_method,
            created_at=order.created_at,
            items=[
                OrderItemModel(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Saved order %s for user %s", order.id, order.user_id)

    async def find_all(self) -> List[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == self._user_id)
            .options(
                selectinload(OrderModel.items).selectinload(OrderItemModel.product),
            )
            .order_by(OrderModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _map_to_domain(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            status=OrderStatus(model.status),
            total=model.total,
            delivery_address=model.delivery_address,
            payment_method=model.payment_method,
            created_at=ensure_tz_aware(model.created_at),
            items=[
                OrderItem(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                    product_name=item.product.name,
                )
                for item in model.items
            ],
        )
