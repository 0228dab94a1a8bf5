import logging
import secrets
from datetime import timedelta

from fastapi.concurrency import run_in_threadpool

from greenbite.domain.shared.time import utc_now
from greenbite_identity.domain.user import UserNotFoundError, UserRepository
from greenbite_identity.exceptions import InvalidOrExpiredCodeError
from greenbite_identity.infrastructure.email import EmailService
from greenbite_identity.repositories import VerificationCodeRepository
from greenbite_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)

CODE_MIN = 100_000
CODE_MAX = 999_999


def generate_verification_code() -> str:
    """Return a 6-digit code drawn uniformly from [100000, 999999]."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


class PasswordResetService:
    """Service for the forgot-password / verify-code / reset-password flow.

    Each email has at most one active code. A new forgot-password request
    replaces the previous code, and a successful reset deletes it.

    With ``require_verified_code`` off, reset only needs the email and the
    new password. With it on, verify_code stamps the stored code and
    reset_password refuses to run without an unexpired, verified code.
    """

    DEFAULT_CODE_TTL_MINUTES = 10

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        code_repository: VerificationCodeRepository,
        password_service: PasswordHashingService,
        email_service: EmailService,
        code_ttl_minutes: int = DEFAULT_CODE_TTL_MINUTES,
        require_verified_code: bool = False,
    ):
        self._user_repo = user_repository
        self._code_repo = code_repository
        self._password_service = password_service
        self._email_service = email_service
        self._code_ttl = timedelta(minutes=code_ttl_minutes)
        self._require_verified_code = require_verified_code

    async def forgot_password(self, email: str) -> None:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)

        code = generate_verification_code()
        expires_at = utc_now() + self._code_ttl
        await self._code_repo.upsert(email, code, expires_at)

        await self._email_service.send_password_reset_code(
            to_email=email,
            code=code,
            ttl_minutes=int(self._code_ttl.total_seconds() // 60),
        )
        logger.info("Password reset code issued for %s", email)

    async def verify_code(self, email: str, code: str) -> None:
        record = await self._code_repo.find_by_email(email)

        if record is None or not record.matches(code):
            logger.info("Code verification failed for %s: no matching code", email)
            raise InvalidOrExpiredCodeError

        if record.is_expired(utc_now()):
            logger.info("Code verification failed for %s: code expired", email)
            raise InvalidOrExpiredCodeError

        if self._require_verified_code:
            await self._code_repo.mark_verified(email)

        logger.info("Password reset code verified for %s", email)

    async def reset_password(self, email: str, new_password: str) -> None:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)

        if self._require_verified_code:
            record = await self._code_repo.find_by_email(email)
            if (
                record is None
                or not record.is_verified()
                or record.is_expired(utc_now())
            ):
                logger.warning("Password reset refused for %s: no verified code", email)
                raise InvalidOrExpiredCodeError

        new_hash = await run_in_threadpool(self._password_service.hash, new_password)
        await self._user_repo.update_password_hash(user.id, new_hash)

        deleted = await self._code_repo.delete_by_email(email)
        logger.info(
            "Password reset completed for %s (%d verification codes removed)",
            email,
            deleted,
        )
