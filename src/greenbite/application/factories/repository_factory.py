"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from greenbite.domain.cart.repositories import CartRepository
from greenbite.domain.catalog.repositories import (
    CategoryRepository,
    ProductRepository,
)
from greenbite.domain.ordering.repositories import OrderRepository

if TYPE_CHECKING:
    from greenbite_identity.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work.

    Catalog repositories are public. Cart and order repositories are
    scoped to ``user_context`` and require one.
    """

    @property
    def user_context(self) -> UserContext | None:
        """Get the current user for repository scoping, if authenticated."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Use this for commit/rollback at the presentation layer.
        """
        ...

    def category_repository(self) -> CategoryRepository:
        ...

    def product_repository(self) -> ProductRepository:
        ...

    def cart_repository(self) -> CartRepository:
        ...

    def order_repository(self) -> OrderRepository:
        ...
