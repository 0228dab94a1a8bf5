"""Tests for UserRepositorySQLAlchemy against SQLite."""

import pytest

from greenbite_identity import EmailAlreadyExistsError, User, UserRole
from greenbite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)


class TestUserRepository:
    async def test_save_and_find(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.create("Ann", "ann@example.com", "hash")

        await repo.save(user)

        by_id = await repo.find_by_id(user.id)
        by_email = await repo.find_by_email("ann@example.com")
        assert by_id == user
        assert by_email == user
        assert by_email.role == UserRole.USER

    async def test_email_lookup_is_case_sensitive(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(User.create("Ann", "ann@example.com", "hash"))

        assert await repo.find_by_email("ANN@example.com") is None

    async def test_lookup_does_not_validate_format(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.create("Ann", "o'brien@example.com", "hash")
        await repo.save(user)

        assert await repo.find_by_email("o'brien@example.com") == user
        assert await repo.find_by_email("not-an-email") is None

    async def test_duplicate_email(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(User.create("Ann", "ann@example.com", "hash"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(User.create("Other Ann", "ann@example.com", "hash"))

    async def test_update_password_hash(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.create("Ann", "ann@example.com", "old-hash")
        await repo.save(user)

        assert await repo.update_password_hash(user.id, "new-hash") is True

        db_session.expire_all()
        reloaded = await repo.find_by_id(user.id)
        assert reloaded.password_hash == "new-hash"

    async def test_role_change_is_persisted(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.create("Ann", "ann@example.com", "hash")
        await repo.save(user)

        user.promote_to_admin()
        await repo.save(user)

        reloaded = await repo.find_by_id(user.id)
        assert reloaded.is_admin is True

    async def test_list_all(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(User.create("Ann", "ann@example.com", "hash"))
        await repo.save(User.create("Bob", "bob@example.com", "hash"))

        assert [u.email for u in await repo.list_all()] == [
            "ann@example.com",
            "bob@example.com",
        ]
