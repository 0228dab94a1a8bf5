"""Email value object.

Provides validated email addresses for user identification. Addresses are
compared exactly as stored; only surrounding whitespace is removed.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from greenbite_identity.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    Uses the same syntax rules as the ``EmailStr`` request fields, without
    DNS deliverability checks.
    """

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip() if self.value else ""
        if not stripped:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        try:
            validate_email(stripped, check_deliverability=False)
        except EmailNotValidError as e:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg) from e

        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
