"""Abstract repository interface for password reset verification codes."""

import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class VerificationCodeData:
    """Immutable verification code data.

    There is at most one record per email. A record whose expires_at has
    passed is invalid even while it is still stored.
    """

    email: str
    code: str
    expires_at: datetime
    verified_at: datetime | None
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check if the code has expired."""
        return now >= self.expires_at

    def is_verified(self) -> bool:
        """Check if the code has been confirmed through verify-code."""
        return self.verified_at is not None

    def matches(self, code: str) -> bool:
        """Compare a submitted code in constant time."""
        return secrets.compare_digest(self.code.encode(), code.encode())


class VerificationCodeRepository(ABC):
    """Abstract repository for password reset verification codes."""

    @abstractmethod
    async def upsert(self, email: str, code: str, expires_at: datetime) -> None:
        """Create or replace the code for an email in one atomic statement.

        Parameters
        ----------
        email
            The address the code was issued for (unique key)
        code
            The 6-digit numeric code
        expires_at
            When the code stops being accepted
        """

    @abstractmethod
    async def find_by_email(self, email: str) -> VerificationCodeData | None:
        """Find the current code for an email, expired or not.

        Parameters
        ----------
        email
            The address to look up

        Returns
        -------
        Code data if a record exists, None otherwise
        """

    @abstractmethod
    async def mark_verified(self, email: str) -> bool:
        """Stamp the code for an email as verified.

        Returns
        -------
        True if a record was updated
        """

    @abstractmethod
    async def delete_by_email(self, email: str) -> int:
        """Delete every code stored for an email.

        Returns
        -------
        Number of records deleted
        """

    @abstractmethod
    async def cleanup_expired(self) -> int:
        """Remove expired codes from the database.

        Returns
        -------
        Number of codes deleted
        """
