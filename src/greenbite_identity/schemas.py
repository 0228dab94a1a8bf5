"""Data passed between identity components."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a session token that passed signature and expiry checks."""

    user_id: UUID
    issued_at: datetime
    exp: datetime
