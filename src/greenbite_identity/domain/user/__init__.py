"""User domain manages shop customer identity.

This domain handles:
- User aggregate (identity: id, name, email, password hash, role)
- Role-based capability checks (USER vs ADMIN)
"""

from greenbite_identity.domain.user.aggregates import User
from greenbite_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    UserNotFoundError,
)
from greenbite_identity.domain.user.repositories import UserRepository
from greenbite_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
