"""User repository interface (the credential store)."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from greenbite_identity.domain.user.aggregates.user import User
from greenbite_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their exact email address."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user.

        Raises EmailAlreadyExistsError when the unique email constraint
        rejects a new user.
        """

    @abstractmethod
    async def update_password_hash(self, user_id: UUID, password_hash: str) -> bool:
        """Replace the stored password hash in a single UPDATE.

        Returns False when no user with that ID exists.
        """

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users, oldest account first."""
