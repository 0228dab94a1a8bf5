"""Email delivery for identity flows."""

from greenbite_identity.infrastructure.email.email_service import EmailService

__all__ = ["EmailService"]
