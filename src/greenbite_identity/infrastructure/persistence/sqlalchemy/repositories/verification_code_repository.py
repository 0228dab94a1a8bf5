"""SQLAlchemy implementation of VerificationCodeRepository."""

import logging
from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from greenbite.domain.shared.time import ensure_tz_aware, utc_now
from greenbite.infrastructure.persistence.sqlalchemy.repositories._utils import (
    upsert_insert,
)
from greenbite_identity.infrastructure.persistence.sqlalchemy.models import (
    VerificationCodeModel,
)
from greenbite_identity.repositories import (
    VerificationCodeData,
    VerificationCodeRepository,
)

logger = logging.getLogger(__name__)


class VerificationCodeRepositorySQLAlchemy(VerificationCodeRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def upsert(self, email: str, code: str, expires_at: datetime) -> None:
        now = utc_now()
        stmt = upsert_insert(self._session)(VerificationCodeModel).values(
            email=email,
            code=code,
            expires_at=expires_at,
            verified_at=None,
            created_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["email"],
            set_={
                "code": code,
                "expires_at": expires_at,
                "verified_at": None,
                "created_at": now,
            },
        )
        await self._session.execute(stmt)
        await self._session.flush()

    async def find_by_email(self, email: str) -> VerificationCodeData | None:
        # upsert bypasses the identity map, so always reload the row
        stmt = (
            select(VerificationCodeModel)
            .where(VerificationCodeModel.email == email)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return VerificationCodeData(
            email=model.email,
            code=model.code,
            expires_at=ensure_tz_aware(model.expires_at),
            verified_at=(
                ensure_tz_aware(model.verified_at) if model.verified_at else None
            ),
            created_at=ensure_tz_aware(model.created_at),
        )

    async def mark_verified(self, email: str) -> bool:
        stmt = (
            update(VerificationCodeModel)
            .where(VerificationCodeModel.email == email)
            .values(verified_at=utc_now())
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return (result.rowcount or 0) > 0  # type: ignore[union-attr]

    async def delete_by_email(self, email: str) -> int:
        stmt = delete(VerificationCodeModel).where(
            VerificationCodeModel.email == email,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0  # type: ignore[union-attr]

    async def cleanup_expired(self) -> int:
        stmt = delete(VerificationCodeModel).where(
            VerificationCodeModel.expires_at < utc_now(),
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        deleted = result.rowcount or 0  # type: ignore[union-attr]
        logger.info("Removed %d expired verification codes", deleted)
        return deleted
