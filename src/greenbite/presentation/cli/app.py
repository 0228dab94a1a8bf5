"""GreenBite CLI application using Typer.

Operational utilities for the backend: secret generation, schema setup,
role management and housekeeping of password reset codes.
"""

import asyncio
import secrets
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession

from greenbite.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_session_maker,
)
from greenbite_identity import User
from greenbite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
    VerificationCodeRepositorySQLAlchemy,
)

T = TypeVar("T")

app = typer.Typer(
    name="greenbite",
    help="GreenBite - online grocery shop backend CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(name="db", help="Database utilities", no_args_is_help=True)
users_app = typer.Typer(name="users", help="User management", no_args_is_help=True)
codes_app = typer.Typer(
    name="codes",
    help="Password reset code maintenance",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(users_app)
app.add_typer(codes_app)


def _run(work: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """Run ``work`` in a fresh session, committing on success."""

    async def runner() -> T:
        engine = get_engine()
        try:
            async with get_session_maker()() as session:
                try:
                    result = await work(session)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
                return result
        finally:
            await engine.dispose()

    return asyncio.run(runner())


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for GreenBite configuration.

    Generates the required secrets:
    - JWT_SECRET_KEY: Secret for signing session tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]GreenBite Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def init_db() -> None:
    """Create all missing database tables."""

    async def runner() -> None:
        engine = get_engine()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(runner())
    console.print("[green]Database schema is up to date[/green]")


def _set_role(email: str, make_admin: bool) -> User | None:
    async def work(session: AsyncSession) -> User | None:
        repo = UserRepositorySQLAlchemy(session)
        user = await repo.find_by_email(email)
        if user is None:
            return None
        if make_admin:
            user.promote_to_admin()
        else:
            user.demote_to_user()
        await repo.save(user)
        return user

    return _run(work)


@users_app.command("promote")
def promote_user(email: str = typer.Argument(..., help="Email of the user")) -> None:
    """Give a user the ADMIN role."""
    user = _set_role(email, make_admin=True)
    if user is None:
        console.print(f"[red]No user with email {email}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]{user.email} is now ADMIN[/green]")


@users_app.command("demote")
def demote_user(email: str = typer.Argument(..., help="Email of the user")) -> None:
    """Return a user to the USER role."""
    user = _set_role(email, make_admin=False)
    if user is None:
        console.print(f"[red]No user with email {email}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]{user.email} is now USER[/green]")


@users_app.command("list")
def list_users() -> None:
    """List all registered users."""

    async def work(session: AsyncSession) -> list[User]:
        return await UserRepositorySQLAlchemy(session).list_all()

    users = _run(work)

    table = Table(title=f"Users ({len(users)})")
    table.add_column("Email", style="cyan")
    table.add_column("Name")
    table.add_column("Role")
    table.add_column("Created", style="dim")
    for user in users:
        table.add_row(
            user.email,
            user.name,
            user.role.value,
            user.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@codes_app.command("cleanup")
def cleanup_codes() -> None:
    """Delete expired password reset codes."""

    async def work(session: AsyncSession) -> int:
        return await VerificationCodeRepositorySQLAlchemy(session).cleanup_expired()

    deleted = _run(work)
    console.print(f"[green]Removed {deleted} expired code(s)[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
