"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from greenbite.infrastructure.persistence.sqlalchemy.repositories.cart import (
    CartRepositorySQLAlchemy,
)
from greenbite.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    CategoryRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
)
from greenbite.infrastructure.persistence.sqlalchemy.repositories.ordering import (
    OrderRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from greenbite_identity.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext | None = None,
    ):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._product_repo: ProductRepositorySQLAlchemy | None = None
        self._cart_repo: CartRepositorySQLAlchemy | None = None
        self._order_repo: OrderRepositorySQLAlchemy | None = None

    @property
    def user_context(self) -> UserContext | None:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def _require_user_context(self) -> UserContext:
        if self._user_context is None:
            msg = "This repository requires an authenticated user context"
            raise RuntimeError(msg)
        return self._user_context

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo

    def product_repository(self) -> ProductRepositorySQLAlchemy:
        if self._product_repo is None:
            self._product_repo = ProductRepositorySQLAlchemy(self._session)
        return self._product_repo

    def cart_repository(self) -> CartRepositorySQLAlchemy:
        if self._cart_repo is None:
            self._cart_repo = CartRepositorySQLAlchemy(
                self._session,
                self._require_user_context(),
            )
        return self._cart_repo

    def order_repository(self) -> OrderRepositorySQLAlchemy:
        if self._order_repo is None:
            self._order_repo = OrderRepositorySQLAlchemy(
                self._session,
                self._require_user_context(),
            )
        return self._order_repo
