"""Shared database fixtures for SQLite-backed tests."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from greenbite.domain.catalog.entities import Category, Product
from greenbite.infrastructure.persistence.sqlalchemy.models import Base
from greenbite.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
)
from greenbite_identity import PasswordHashingService, User
from greenbite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database shared by all sessions of a test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(test_session_maker):
    async with test_session_maker() as session:
        yield session


async def _create_user(
    session: AsyncSession,
    email: str,
    password: str = "secret1",
    name: str = "Test User",
    admin: bool = False,
) -> User:
    """Persist a user with a real bcrypt hash and commit."""
    user = User.create(name, email, PasswordHashingService(rounds=4).hash(password))
    if admin:
        user.promote_to_admin()
    await UserRepositorySQLAlchemy(session).save(user)
    await session.commit()
    return user


async def _create_product(
    session: AsyncSession,
    name: str = "Carrots",
    price: str = "2.49",
    category_name: str = "Vegetables",
) -> Product:
    """Persist a category and one product in it and commit."""
    category = Category(name=category_name, image="https://img.example.com/c.png")
    await CategoryRepositorySQLAlchemy(session).save(category)

    product = Product.create(
        name=name,
        price=Decimal(price),
        image="https://img.example.com/p.png",
        category_id=category.id,
        stock=10,
    )
    await ProductRepositorySQLAlchemy(session).save(product)
    await session.commit()
    return product


@pytest.fixture
def make_user():
    return _create_user


@pytest.fixture
def make_product():
    return _create_product
