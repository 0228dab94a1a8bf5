"""Helpers for turning unexpected failures into generic 500 responses."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from greenbite_identity.exceptions import MailDispatchError

logger = logging.getLogger(__name__)

TRANSIENT_STORAGE_ERRORS = (OperationalError, PoolTimeoutError, TimeoutError)


def internal_error(
    operation: str,
    exc: Exception,
    email: str | None = None,
) -> HTTPException:
    """Log an unexpected failure and build the generic 500 for it.

    The returned exception never carries internal details; those go to the
    log together with the operation and the email involved.
    """
    if isinstance(exc, TRANSIENT_STORAGE_ERRORS):
        logger.error(
            "Transient storage failure during %s (email=%s): %s",
            operation,
            email,
            exc,
        )
    elif isinstance(exc, MailDispatchError):
        logger.error(
            "Mail dispatch failed during %s (email=%s): %s",
            operation,
            email,
            exc.reason,
        )
    else:
        logger.exception("%s failed (email=%s): %s", operation, email, exc)

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Something went wrong",
    )
