"""SQLAlchemy declarative base for greenbite_identity models.

Uses the same metadata as the shop's Base so cart and order tables can
reference users with foreign keys.
"""

from greenbite.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
