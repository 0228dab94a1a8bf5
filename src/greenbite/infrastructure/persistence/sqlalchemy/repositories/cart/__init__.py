"""Cart repository implementations."""

from greenbite.infrastructure.persistence.sqlalchemy.repositories.cart.cart_repository import (  # NOQA: E501
    CartRepositorySQLAlchemy,
)

__all__ = ["CartRepositorySQLAlchemy"]
