"""Identity and authentication exceptions.

These exceptions are raised by the greenbite_identity package and should be
caught and handled by the presentation layer. Each carries a stable error
code so responses stay consistent no matter which router raised them.
"""

from greenbite.domain.shared.exceptions import ErrorCode


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a session token is invalid, expired, or malformed."""

    code = ErrorCode.INVALID_TOKEN

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class MissingTokenError(AuthError):
    """Raised when a request carries no session token at all."""

    code = ErrorCode.NO_TOKEN

    def __init__(self, message: str = "No token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during signin.

    Used for both an unknown email and a wrong password so callers cannot
    tell which accounts exist.
    """

    code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InvalidOrExpiredCodeError(AuthError):
    """Raised when a password reset code is missing, wrong, or expired."""

    code = ErrorCode.INVALID_OR_EXPIRED_CODE

    def __init__(self, message: str = "Invalid or expired code"):
        super().__init__(message)


class MailDispatchError(Exception):
    """Raised when an email could not be handed to the SMTP server."""

    def __init__(self, to_email: str, reason: str):
        self.to_email = to_email
        self.reason = reason
        super().__init__(f"Failed to send email to {to_email}: {reason}")
