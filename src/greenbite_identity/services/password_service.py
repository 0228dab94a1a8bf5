"""bcrypt password hashing for stored credentials."""

import bcrypt

from greenbite_identity.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash and check passwords with bcrypt at a fixed cost.

    The cost comes from settings (``BCRYPT_ROUNDS``) so tests can run with
    a cheap one. ``hash`` refuses passwords outside the accepted length
    range before spending any bcrypt work on them.
    """

    MIN_LENGTH = 6
    MAX_BYTES = 72  # bcrypt ignores everything past 72 bytes

    DEFAULT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is shorter than six characters or longer than
            bcrypt can take
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        A hash bcrypt cannot parse counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            return False

    def validate_strength(self, password: str) -> None:
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Whether a stored hash was made with a different cost.

        Hashes look like ``$2b$10$<salt+digest>``. Anything that does not
        parse is reported as needing a rehash.
        """
        _, _, cost, *_ = [*password_hash.split("$"), "", "", ""]
        if not cost.isdigit():
            return True
        return int(cost) != self._rounds
