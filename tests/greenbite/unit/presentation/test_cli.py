"""Tests for the operational CLI."""

import pytest
from typer.testing import CliRunner

from greenbite.presentation.api import dependencies
from greenbite.presentation.cli.app import _run, app
from greenbite_identity import PasswordHashingService, User
from greenbite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

runner = CliRunner()


def _clear_engine_caches() -> None:
    dependencies.get_database_url.cache_clear()
    dependencies.get_engine.cache_clear()
    dependencies.get_session_maker.cache_clear()


@pytest.fixture
def cli_database(tmp_path, monkeypatch):
    """Point the CLI at a fresh SQLite file with the schema in place."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    _clear_engine_caches()

    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output

    yield

    _clear_engine_caches()


def _seed_user(email: str) -> None:
    async def work(session):
        user = User.create("Ann", email, PasswordHashingService(rounds=4).hash("x" * 6))
        await UserRepositorySQLAlchemy(session).save(user)

    _run(work)


def test_generate_secrets():
    result = runner.invoke(app, ["secrets", "generate"])

    assert result.exit_code == 0
    assert "JWT_SECRET_KEY=" in result.output
    assert "POSTGRES_PASSWORD=" in result.output


@pytest.mark.usefixtures("cli_database")
class TestUserCommands:
    def test_promote_and_demote(self):
        _seed_user("ann@example.com")

        promoted = runner.invoke(app, ["users", "promote", "ann@example.com"])
        listed = runner.invoke(app, ["users", "list"])
        demoted = runner.invoke(app, ["users", "demote", "ann@example.com"])

        assert promoted.exit_code == 0
        assert "ann@example.com is now ADMIN" in promoted.output
        assert "ADMIN" in listed.output
        assert demoted.exit_code == 0
        assert "is now USER" in demoted.output

    def test_promote_unknown_user(self):
        result = runner.invoke(app, ["users", "promote", "ghost@example.com"])

        assert result.exit_code == 1
        assert "No user with email ghost@example.com" in result.output

    def test_cleanup_codes_on_empty_store(self):
        result = runner.invoke(app, ["codes", "cleanup"])

        assert result.exit_code == 0
        assert "Removed 0 expired code(s)" in result.output
