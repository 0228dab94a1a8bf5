"""Value objects for the user domain."""

from greenbite_identity.domain.user.value_objects.email import Email
from greenbite_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "UserRole",
]
