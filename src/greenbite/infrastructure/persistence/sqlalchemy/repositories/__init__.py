"""SQLAlchemy repository implementations for the shop domain.

The repository factory lives in ``factory`` and is imported from there
directly, since it also wires in identity repositories.
"""

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

__all__ = [
    "CartRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "OrderRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
]
