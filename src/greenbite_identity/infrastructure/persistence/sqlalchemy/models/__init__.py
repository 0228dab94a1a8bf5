# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from greenbite_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)
from greenbite_identity.infrastructure.persistence.sqlalchemy.models.verification_code_model import (
    VerificationCodeModel,
)

__all__ = [
    "UserModel",
    "VerificationCodeModel",
]
