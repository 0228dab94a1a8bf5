"""Abstract repository interfaces for identity management."""

from greenbite_identity.repositories.verification_code_repository import (
    VerificationCodeData,
    VerificationCodeRepository,
)

__all__ = [
    "VerificationCodeData",
    "VerificationCodeRepository",
]
