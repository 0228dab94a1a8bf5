"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from greenbite_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable view of the authenticated user for one request."""

    user_id: UUID
    email: str
    name: str
    is_admin: bool = False

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(
            user_id=user.id,
            email=user.email,
            name=user.name,
            is_admin=user.is_admin,
        )

    def __str__(self) -> str:
        return f"UserContext({self.email})"
