"""Product entity."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from greenbite.domain.shared.exceptions import ValidationError
from greenbite.domain.shared.time import utc_now

if TYPE_CHECKING:
    from greenbite.domain.catalog.entities.category import Category

MIN_NAME_LENGTH = 2


class Product:
    """
    A sellable product.

    Invariants:
    - price is strictly positive
    - stock is a strictly positive integer when the product is created
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        price: Decimal,
        image: str,
        category_id: UUID,
        stock: int,
        description: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        category: Optional[Category] = None,
    ):
        name = name.strip() if name else ""
        if len(name) < MIN_NAME_LENGTH:
            msg = f"Product name must be at least {MIN_NAME_LENGTH} characters"
            raise ValidationError(msg, details={"name": name})

        price = Decimal(str(price))
        if price <= 0:
            msg = "Price must be positive"
            raise ValidationError(msg, details={"price": str(price)})

        self._id = id if id is not None else uuid4()
        self._name = name
        self._description = description
        self._price = price
        self._image = image
        self._category_id = category_id
        self._stock = stock
        self._created_at = created_at or utc_now()
        self._category = category

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        name: str,
        price: Decimal,
        image: str,
        category_id: UUID,
        stock: int,
        description: Optional[str] = None,
    ) -> Product:
        if stock <= 0:
            msg = "Stock must be a positive integer"
            raise ValidationError(msg, details={"stock": stock})
        return cls(
            name=name,
            price=price,
            image=image,
            category_id=category_id,
            stock=stock,
            description=description,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        price: Decimal,
        image: str,
        category_id: UUID,
        stock: int,
        description: Optional[str],
        created_at: datetime,
        category: Optional[Category] = None,
    ) -> Product:
        return cls(
            id=id,
            name=name,
            price=price,
            image=image,
            category_id=category_id,
            stock=stock,
            description=description,
            created_at=created_at,
            category=category,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def image(self) -> str:
        return self._image

    @property
    def category_id(self) -> UUID:
        return self._category_id

    @property
    def stock(self) -> int:
        return self._stock

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def category(self) -> Optional[Category]:
        return self._category

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Product(id={self._id}, name={self._name!r}, price={self._price})"
