"""Catalog schemas for categories and products."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from greenbite.domain.catalog.entities import Category, Product


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    image: HttpUrl = Field(..., description="Image URL")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Vegetables",
                "image": "https://cdn.example.com/categories/vegetables.png",
            },
        },
    )


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=200)
    description: str | None = None
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    image: HttpUrl = Field(..., description="Image URL")
    category_id: UUID
    stock: int = Field(..., gt=0, description="Units in stock")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Organic Carrots",
                "description": "1 kg bag",
                "price": 2.49,
                "image": "https://cdn.example.com/products/carrots.png",
                "category_id": "7b0f3f4e-3c1e-4a8e-9a51-0c9f1f0c7f10",
                "stock": 40,
            },
        },
    )


class CategoryResponse(BaseModel):
    id: UUID
    name: str
    image: str
    created_at: datetime

    @classmethod
    def from_domain(cls, category: Category) -> CategoryResponse:
        return cls(
            id=category.id,
            name=category.name,
            image=category.image,
            created_at=category.created_at,
        )


class ProductResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    price: float
    image: str
    category_id: UUID
    stock: int
    created_at: datetime
    category: CategoryResponse | None = None

    @classmethod
    def from_domain(cls, product: Product) -> ProductResponse:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price),
            image=product.image,
            category_id=product.category_id,
            stock=product.stock,
            created_at=product.created_at,
            category=(
                CategoryResponse.from_domain(product.category)
                if product.category is not None
                else None
            ),
        )


class CategoryDetailResponse(CategoryResponse):
    """A category together with its products."""

    products: list[ProductResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, category: Category) -> CategoryDetailResponse:
        return cls(
            id=category.id,
            name=category.name,
            image=category.image,
            created_at=category.created_at,
            products=[ProductResponse.from_domain(p) for p in category.products or []],
        )
