"""GreenBite Identity - accounts, sessions and password recovery.

This package handles all identity-related concerns:
- User accounts (signup, roles)
- Authentication (signin, session tokens)
- Password management (hashing, emailed reset codes)

The shop domain (catalog, cart, orders) only references user_id,
keeping identity concerns separated.
"""

from greenbite_identity.application.context import UserContext
from greenbite_identity.application.services import (
    AuthenticationService,
    PasswordResetService,
)
from greenbite_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from greenbite_identity.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidOrExpiredCodeError,
    InvalidTokenError,
    MailDispatchError,
    MissingTokenError,
    WeakPasswordError,
)
from greenbite_identity.repositories import (
    VerificationCodeData,
    VerificationCodeRepository,
)
from greenbite_identity.schemas import TokenPayload
from greenbite_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidOrExpiredCodeError",
    "InvalidTokenError",
    "MailDispatchError",
    "MissingTokenError",
    "WeakPasswordError",
    # Repositories
    "VerificationCodeData",
    "VerificationCodeRepository",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application Context
    "UserContext",
    # Application Services
    "AuthenticationService",
    "PasswordResetService",
]
