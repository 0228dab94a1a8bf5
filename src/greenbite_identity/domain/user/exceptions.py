"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from greenbite.domain.shared.exceptions import ErrorCode


class InvalidEmailError(ValueError):
    """Raised when email format is invalid."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidUserNameError(ValueError):
    """Raised when a display name is too short."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    code = ErrorCode.EMAIL_TAKEN

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class UserNotFoundError(Exception):
    """User not found."""

    code = ErrorCode.USER_NOT_FOUND

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")
