"""Pytest fixtures for API tests."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from greenbite.presentation.api.app import API_PREFIX, create_app
from greenbite.presentation.api.config import get_api_settings
from greenbite.presentation.api.dependencies import get_db_session
from greenbite_config.settings import Settings
from greenbite_identity.application.services import generate_verification_code

TEST_PASSWORD = "secret1"
ADMIN_EMAIL = "admin@example.com"

CODE_GENERATOR_PATH = (
    "greenbite_identity.application.services.password_reset_service"
    ".generate_verification_code"
)


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url_override="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        api_cookie_secure=False,
        bcrypt_rounds=4,
        smtp_enabled=False,
    )


@pytest.fixture
def test_client(api_settings, test_session_maker) -> TestClient:
    """Create a test client backed by the in-memory database."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def issued_codes():
    """Record every reset code handed out while the test runs."""
    codes: list[str] = []

    def record() -> str:
        code = generate_verification_code()
        codes.append(code)
        return code

    with patch(CODE_GENERATOR_PATH, side_effect=record):
        yield codes


@pytest.fixture
def signup(test_client, api_prefix):
    """Sign up through the API; the client keeps the session cookie."""

    def _signup(email: str, name: str = "Test User", password: str = TEST_PASSWORD):
        response = test_client.post(
            f"{api_prefix}/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()["user"]

    return _signup


@pytest.fixture
def signin(test_client, api_prefix):
    def _signin(email: str, password: str = TEST_PASSWORD):
        response = test_client.post(
            f"{api_prefix}/auth/signin",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()["user"]

    return _signin


@pytest.fixture
async def admin_user(test_session_maker, make_user):
    async with test_session_maker() as session:
        return await make_user(session, ADMIN_EMAIL, name="Admin", admin=True)


@pytest.fixture
async def product(test_session_maker, make_product):
    async with test_session_maker() as session:
        return await make_product(session, name="Carrots", price="2.49")


@pytest.fixture
def as_admin(test_client, admin_user, signin) -> TestClient:
    """The test client signed in as an ADMIN user."""
    signin(ADMIN_EMAIL)
    return test_client
