"""Category entity."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from greenbite.domain.shared.exceptions import ValidationError
from greenbite.domain.shared.time import utc_now

if TYPE_CHECKING:
    from greenbite.domain.catalog.entities.product import Product

MIN_NAME_LENGTH = 2


class Category:
    """A product category shown on the storefront (e.g. "Vegetables")."""

    def __init__(
        self,
        name: str,
        image: str,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        products: Optional[list[Product]] = None,
    ):
        name = name.strip() if name else ""
        if len(name) < MIN_NAME_LENGTH:
            msg = f"Category name must be at least {MIN_NAME_LENGTH} characters"
            raise ValidationError(msg, details={"name": name})

        self._id = id if id is not None else uuid4()
        self._name = name
        self._image = image
        self._created_at = created_at or utc_now()
        self._products = products

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        image: str,
        created_at: datetime,
        products: Optional[list[Product]] = None,
    ) -> Category:
        return cls(
            id=id,
            name=name,
            image=image,
            created_at=created_at,
            products=products,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def image(self) -> str:
        return self._image

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def products(self) -> Optional[list[Product]]:
        """Products in this category, or None when they were not loaded."""
        return self._products

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Category(id={self._id}, name={self._name!r})"
