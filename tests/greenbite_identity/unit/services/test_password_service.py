"""Unit tests for PasswordHashingService."""

import pytest

from greenbite_identity import PasswordHashingService, WeakPasswordError


@pytest.fixture
def service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


class TestHash:
    def test_hash_is_not_plaintext(self, service):
        hashed = service.hash("secret1")

        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self, service):
        assert service.hash("secret1") != service.hash("secret1")

    def test_uses_configured_rounds(self):
        hashed = PasswordHashingService(rounds=5).hash("secret1")

        assert hashed.split("$")[2] == "05"

    @pytest.mark.parametrize("password", ["", "abc", "12345"])
    def test_rejects_short_passwords(self, service, password):
        with pytest.raises(WeakPasswordError):
            service.hash(password)

    def test_rejects_passwords_over_72_bytes(self, service):
        # 37 two-byte characters is 74 bytes
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            service.hash("é" * 37)


class TestVerify:
    def test_correct_password(self, service):
        hashed = service.hash("secret1")

        assert service.verify("secret1", hashed) is True

    def test_wrong_password(self, service):
        hashed = service.hash("secret1")

        assert service.verify("secret2", hashed) is False

    def test_malformed_hash_is_a_mismatch(self, service):
        assert service.verify("secret1", "not-a-bcrypt-hash") is False


class TestNeedsRehash:
    def test_same_cost(self, service):
        assert service.needs_rehash(service.hash("secret1")) is False

    def test_different_cost(self, service):
        hashed = PasswordHashingService(rounds=5).hash("secret1")

        assert service.needs_rehash(hashed) is True

    @pytest.mark.parametrize("password_hash", ["", "plain", "$2b$xx$abc"])
    def test_unparseable_hash(self, service, password_hash):
        assert service.needs_rehash(password_hash) is True
