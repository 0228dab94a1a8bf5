from enum import Enum


class UserRole(str, Enum):
    """User roles (who may manage the catalog and who may not)."""

    USER = "USER"
    ADMIN = "ADMIN"
