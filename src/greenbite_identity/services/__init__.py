"""Identity services - JWT and password hashing."""

from greenbite_identity.services.jwt_service import JWTService
from greenbite_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
