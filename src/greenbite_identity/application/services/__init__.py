"""Application services for identity management."""

from greenbite_identity.application.services.authentication_service import (
    AuthenticationService,
)
from greenbite_identity.application.services.password_reset_service import (
    PasswordResetService,
    generate_verification_code,
)

__all__ = [
    "AuthenticationService",
    "PasswordResetService",
    "generate_verification_code",
]
