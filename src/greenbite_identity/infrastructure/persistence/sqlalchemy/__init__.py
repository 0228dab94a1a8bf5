"""SQLAlchemy implementation for greenbite_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- VerificationCodeModel: SQLAlchemy model for password reset codes
- UserRepositorySQLAlchemy: Repository implementation for users
- VerificationCodeRepositorySQLAlchemy: Repository implementation for codes
"""

from greenbite_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from greenbite_identity.infrastructure.persistence.sqlalchemy.models import (
    UserModel,
    VerificationCodeModel,
)
from greenbite_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
    VerificationCodeRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "VerificationCodeModel",
    "VerificationCodeRepositorySQLAlchemy",
]
