"""API tests for forgot-password, verify-code and reset-password."""

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from greenbite.domain.shared.time import utc_now
from greenbite_identity import MailDispatchError

EMAIL = "ann@example.com"
CLOCK_PATH = "greenbite_identity.application.services.password_reset_service.utc_now"
SEND_PATH = (
    "greenbite_identity.infrastructure.email.email_service"
    ".EmailService.send_password_reset_code"
)


@pytest.fixture
def registered(test_client: TestClient, signup):
    signup(EMAIL)
    test_client.cookies.clear()


def _forgot(client: TestClient, prefix: str, email: str = EMAIL):
    return client.post(f"{prefix}/auth/forgot-password", json={"email": email})


def _verify(client: TestClient, prefix: str, code: str, email: str = EMAIL):
    return client.post(
        f"{prefix}/auth/verify-code",
        json={"email": email, "code": code},
    )


def _reset(client: TestClient, prefix: str, password: str, email: str = EMAIL):
    return client.post(
        f"{prefix}/auth/reset-password",
        json={"email": email, "password": password},
    )


@pytest.mark.usefixtures("registered")
class TestForgotPassword:
    def test_issues_code(self, test_client, api_prefix, issued_codes):
        response = _forgot(test_client, api_prefix)

        assert response.status_code == 200
        assert response.json() == {"message": "Reset code sent to email"}
        assert len(issued_codes) == 1

    def test_unknown_email(self, test_client, api_prefix, issued_codes):
        response = _forgot(test_client, api_prefix, email="nobody@example.com")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found", "code": "USER_NOT_FOUND"}
        assert issued_codes == []

    def test_invalid_email(self, test_client, api_prefix):
        response = _forgot(test_client, api_prefix, email="nope")

        assert response.status_code == 400

    def test_mail_failure_is_generic_and_stores_nothing(
        self,
        test_client,
        api_prefix,
        issued_codes,
    ):
        with patch(
            SEND_PATH,
            new=AsyncMock(side_effect=MailDispatchError(EMAIL, "connection refused")),
        ):
            response = _forgot(test_client, api_prefix)

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Something went wrong",
            "code": "INTERNAL_ERROR",
        }
        assert "connection refused" not in response.text

        # The code upsert was rolled back together with the failed send
        assert _verify(test_client, api_prefix, issued_codes[0]).status_code == 400


@pytest.mark.usefixtures("registered")
class TestVerifyCode:
    def test_valid_code(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)

        response = _verify(test_client, api_prefix, issued_codes[0])

        assert response.status_code == 200
        assert response.json() == {"message": "Code verified"}

    def test_verifying_twice_is_allowed(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)

        assert _verify(test_client, api_prefix, issued_codes[0]).status_code == 200
        assert _verify(test_client, api_prefix, issued_codes[0]).status_code == 200

    def test_wrong_code(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)
        wrong = "100000" if issued_codes[0] != "100000" else "100001"

        response = _verify(test_client, api_prefix, wrong)

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Invalid or expired code",
            "code": "INVALID_OR_EXPIRED_CODE",
        }

    def test_no_code_issued(self, test_client, api_prefix):
        response = _verify(test_client, api_prefix, "123456")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_OR_EXPIRED_CODE"

    def test_expired_code(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)

        with patch(CLOCK_PATH, return_value=utc_now() + timedelta(minutes=11)):
            response = _verify(test_client, api_prefix, issued_codes[0])

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_OR_EXPIRED_CODE"

    def test_new_request_replaces_old_code(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)
        _forgot(test_client, api_prefix)
        first, second = issued_codes

        assert _verify(test_client, api_prefix, second).status_code == 200
        if first != second:
            assert _verify(test_client, api_prefix, first).status_code == 400

    @pytest.mark.parametrize("code", ["12345", "1234567", "abcdef"])
    def test_malformed_code(self, test_client, api_prefix, code):
        response = _verify(test_client, api_prefix, code)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.usefixtures("registered")
class TestResetPassword:
    def test_full_flow(self, test_client, api_prefix, issued_codes, signin):
        _forgot(test_client, api_prefix)
        assert _verify(test_client, api_prefix, issued_codes[0]).status_code == 200

        response = _reset(test_client, api_prefix, "brand-new-pw")

        assert response.status_code == 200
        assert response.json() == {"message": "Password reset successfully"}

        signin(EMAIL, password="brand-new-pw")
        old = test_client.post(
            f"{api_prefix}/auth/signin",
            json={"email": EMAIL, "password": "secret1"},
        )
        assert old.status_code == 400

    def test_reset_discards_code(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)

        assert _reset(test_client, api_prefix, "brand-new-pw").status_code == 200

        assert _verify(test_client, api_prefix, issued_codes[0]).status_code == 400

    def test_unknown_email(self, test_client, api_prefix):
        response = _reset(
            test_client,
            api_prefix,
            "brand-new-pw",
            email="nobody@example.com",
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_short_password(self, test_client, api_prefix):
        response = _reset(test_client, api_prefix, "123")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestRequireVerifiedCode:
    @pytest.fixture
    def api_settings(self, api_settings):
        return api_settings.model_copy(
            update={"password_reset_require_verified_code": True},
        )

    @pytest.fixture(autouse=True)
    def _registered(self, registered):
        pass

    def test_reset_without_verification_is_refused(
        self,
        test_client,
        api_prefix,
        issued_codes,
    ):
        _forgot(test_client, api_prefix)

        response = _reset(test_client, api_prefix, "brand-new-pw")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_OR_EXPIRED_CODE"

    def test_reset_after_verification(self, test_client, api_prefix, issued_codes):
        _forgot(test_client, api_prefix)
        _verify(test_client, api_prefix, issued_codes[0])

        assert _reset(test_client, api_prefix, "brand-new-pw").status_code == 200


class TestApostropheEmail:
    EMAIL = "o'brien@example.com"

    def test_unregistered_address_gets_domain_errors(self, test_client, api_prefix):
        signin = test_client.post(
            f"{api_prefix}/auth/signin",
            json={"email": self.EMAIL, "password": "secret1"},
        )
        assert signin.status_code == 400
        assert signin.json()["code"] == "INVALID_CREDENTIALS"

        forgot = _forgot(test_client, api_prefix, email=self.EMAIL)
        assert forgot.status_code == 404
        assert forgot.json()["code"] == "USER_NOT_FOUND"

        reset = _reset(test_client, api_prefix, "brand-new-pw", email=self.EMAIL)
        assert reset.status_code == 404
        assert reset.json()["code"] == "USER_NOT_FOUND"

    def test_full_account_flow(
        self,
        test_client,
        api_prefix,
        issued_codes,
        signup,
        signin,
    ):
        signup(self.EMAIL)
        test_client.cookies.clear()
        signin(self.EMAIL)

        assert _forgot(test_client, api_prefix, email=self.EMAIL).status_code == 200
        verify = _verify(test_client, api_prefix, issued_codes[0], email=self.EMAIL)
        assert verify.status_code == 200
        reset = _reset(test_client, api_prefix, "brand-new-pw", email=self.EMAIL)
        assert reset.status_code == 200

        signin(self.EMAIL, password="brand-new-pw")
