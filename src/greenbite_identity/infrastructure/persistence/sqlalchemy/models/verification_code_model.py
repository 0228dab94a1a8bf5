"""SQLAlchemy model for password reset verification codes."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from greenbite.domain.shared.time import utc_now
from greenbite_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class VerificationCodeModel(IdentityBase):
    """One active reset code per email address."""

    __tablename__ = "verification_codes"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return (
            f"<VerificationCodeModel(email={self.email}, "
            f"expires_at={self.expires_at})>"
        )
