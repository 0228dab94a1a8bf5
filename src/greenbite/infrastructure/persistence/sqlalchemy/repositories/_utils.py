"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

# Dialects with a native INSERT ... ON CONFLICT
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def upsert_insert(session: AsyncSession):
    """Return the dialect-specific ``insert`` that supports ON CONFLICT.

    Upserts must be a single statement so concurrent requests cannot
    interleave between a read and a write.
    """
    dialect = session.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        msg = f"Atomic upsert is not supported on {dialect}"
        raise NotImplementedError(msg) from None
