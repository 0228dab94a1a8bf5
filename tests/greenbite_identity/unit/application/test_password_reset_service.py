"""Unit tests for PasswordResetService."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock, patch

import pytest

from greenbite.domain.shared.time import utc_now
from greenbite_identity import (
    InvalidOrExpiredCodeError,
    MailDispatchError,
    PasswordHashingService,
    User,
    UserNotFoundError,
)
from greenbite_identity.application.services import (
    PasswordResetService,
    generate_verification_code,
)
from greenbite_identity.infrastructure.email import EmailService
from greenbite_identity.repositories import VerificationCodeData

TEST_EMAIL = "ann@example.com"
TEST_CODE = "123456"
TEST_NEW_PASSWORD = "new-secret"


def _code_record(
    code: str = TEST_CODE,
    expires_in: timedelta = timedelta(minutes=5),
    verified: bool = False,
) -> VerificationCodeData:
    now = utc_now()
    return VerificationCodeData(
        email=TEST_EMAIL,
        code=code,
        expires_at=now + expires_in,
        verified_at=now if verified else None,
        created_at=now,
    )


class _ServiceTestBase:
    require_verified_code = False

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.code_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "new-hash"
        self.email_service = Mock(spec=EmailService)
        self.user = User.create("Ann", TEST_EMAIL, "old-hash")

        self.service = PasswordResetService(
            user_repository=self.user_repo,
            code_repository=self.code_repo,
            password_service=self.password_service,
            email_service=self.email_service,
            require_verified_code=self.require_verified_code,
        )


class TestGenerateVerificationCode:
    def test_codes_are_six_digits_in_range(self):
        for _ in range(500):
            code = generate_verification_code()
            assert len(code) == 6
            assert code.isdigit()
            assert 100000 <= int(code) <= 999999

    def test_bounds_are_reachable(self):
        with patch(
            "greenbite_identity.application.services.password_reset_service"
            ".secrets.randbelow",
            side_effect=[0, 899999],
        ) as randbelow:
            assert generate_verification_code() == "100000"
            assert generate_verification_code() == "999999"

        randbelow.assert_called_with(900000)


class TestForgotPassword(_ServiceTestBase):
    async def test_stores_code_with_ten_minute_expiry_and_sends_it(self):
        self.user_repo.find_by_email.return_value = self.user
        before = utc_now()

        await self.service.forgot_password(TEST_EMAIL)

        self.code_repo.upsert.assert_awaited_once()
        email, code, expires_at = self.code_repo.upsert.await_args.args
        assert email == TEST_EMAIL
        assert len(code) == 6
        assert before + timedelta(minutes=10) <= expires_at
        assert expires_at <= utc_now() + timedelta(minutes=10)

        self.email_service.send_password_reset_code.assert_awaited_once_with(
            to_email=TEST_EMAIL,
            code=code,
            ttl_minutes=10,
        )

    async def test_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.forgot_password("nobody@example.com")

        self.code_repo.upsert.assert_not_called()
        self.email_service.send_password_reset_code.assert_not_called()

    async def test_mail_failure_propagates(self):
        self.user_repo.find_by_email.return_value = self.user
        self.email_service.send_password_reset_code.side_effect = MailDispatchError(
            TEST_EMAIL,
            "connection refused",
        )

        with pytest.raises(MailDispatchError):
            await self.service.forgot_password(TEST_EMAIL)


class TestVerifyCode(_ServiceTestBase):
    async def test_matching_unexpired_code(self):
        self.code_repo.find_by_email.return_value = _code_record()

        await self.service.verify_code(TEST_EMAIL, TEST_CODE)

        # Without the hardening flag nothing is written
        self.code_repo.mark_verified.assert_not_called()

    async def test_no_code_stored(self):
        self.code_repo.find_by_email.return_value = None

        with pytest.raises(InvalidOrExpiredCodeError):
            await self.service.verify_code(TEST_EMAIL, TEST_CODE)

    async def test_wrong_code(self):
        self.code_repo.find_by_email.return_value = _code_record()

        with pytest.raises(InvalidOrExpiredCodeError):
            await self.service.verify_code(TEST_EMAIL, "654321")

    async def test_expired_code(self):
        self.code_repo.find_by_email.return_value = _code_record(
            expires_in=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidOrExpiredCodeError):
            await self.service.verify_code(TEST_EMAIL, TEST_CODE)


class TestResetPassword(_ServiceTestBase):
    async def test_updates_hash_and_deletes_codes(self):
        self.user_repo.find_by_email.return_value = self.user
        self.code_repo.delete_by_email.return_value = 1

        await self.service.reset_password(TEST_EMAIL, TEST_NEW_PASSWORD)

        self.password_service.hash.assert_called_once_with(TEST_NEW_PASSWORD)
        self.user_repo.update_password_hash.assert_awaited_once_with(
            self.user.id,
            "new-hash",
        )
        self.code_repo.delete_by_email.assert_awaited_once_with(TEST_EMAIL)

    async def test_does_not_require_a_code(self):
        self.user_repo.find_by_email.return_value = self.user
        self.code_repo.delete_by_email.return_value = 0

        await self.service.reset_password(TEST_EMAIL, TEST_NEW_PASSWORD)

        self.code_repo.find_by_email.assert_not_called()
        self.user_repo.update_password_hash.assert_awaited_once()

    async def test_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.reset_password("nobody@example.com", TEST_NEW_PASSWORD)

        self.user_repo.update_password_hash.assert_not_called()
        self.code_repo.delete_by_email.assert_not_called()


class TestRequireVerifiedCode(_ServiceTestBase):
    require_verified_code = True

    async def test_verify_marks_code(self):
        self.code_repo.find_by_email.return_value = _code_record()

        await self.service.verify_code(TEST_EMAIL, TEST_CODE)

        self.code_repo.mark_verified.assert_awaited_once_with(TEST_EMAIL)

    async def test_reset_without_verified_code_is_refused(self):
        self.user_repo.find_by_email.return_value = self.user
        self.code_repo.find_by_email.return_value = _code_record(verified=False)

        with pytest.raises(InvalidOrExpiredCodeError):
            await self.service.reset_password(TEST_EMAIL, TEST_NEW_PASSWORD)

        self.user_repo.update_password_hash.assert_not_called()

    async def test_reset_with_expired_verified_code_is_refused(self):
        self.user_repo.find_by_email.return_value = self.user
        self.code_repo.find_by_email.return_value = _code_record(
            expires_in=timedelta(seconds=-1),
            verified=True,
        )

        with pytest.raises(InvalidOrExpiredCodeError):
            await self.service.reset_password(TEST_EMAIL, TEST_NEW_PASSWORD)

    async def test_reset_with_verified_code(self):
        self.user_repo.find_by_email.return_value = self.user
        self.code_repo.find_by_email.return_value = _code_record(verified=True)
        self.code_repo.delete_by_email.return_value = 1

        await self.service.reset_password(TEST_EMAIL, TEST_NEW_PASSWORD)

        self.user_repo.update_password_hash.assert_awaited_once()
        self.code_repo.delete_by_email.assert_awaited_once_with(TEST_EMAIL)
