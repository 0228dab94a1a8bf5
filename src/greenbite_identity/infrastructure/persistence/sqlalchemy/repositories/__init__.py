# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from greenbite_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)
from greenbite_identity.infrastructure.persistence.sqlalchemy.repositories.verification_code_repository import (
    VerificationCodeRepositorySQLAlchemy,
)

__all__ = [
    "UserRepositorySQLAlchemy",
    "VerificationCodeRepositorySQLAlchemy",
]
