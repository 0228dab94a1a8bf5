"""User aggregate for shop customers and administrators."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from greenbite.domain.shared.time import utc_now
from greenbite_identity.domain.user.exceptions import InvalidUserNameError
from greenbite_identity.domain.user.value_objects import UserRole
from greenbite_identity.domain.user.value_objects.email import Email

MIN_NAME_LENGTH = 2


class User:
    """
    User aggregate root.

    Holds the identity record together with the password hash. The hash is
    produced by PasswordHashingService; the aggregate never sees plaintext.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
        profile_image_url: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        name = name.strip() if name else ""
        if len(name) < MIN_NAME_LENGTH:
            msg = f"Name must be at least {MIN_NAME_LENGTH} characters"
            raise InvalidUserNameError(msg)

        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._profile_image_url = profile_image_url
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def profile_image_url(self) -> str | None:
        return self._profile_image_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def promote_to_admin(self) -> None:
        self._role = UserRole.ADMIN
        self._updated_at = utc_now()

    def demote_to_user(self) -> None:
        self._role = UserRole.USER
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        return cls(name=name, email=email, password_hash=password_hash, role=role)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole],
        profile_image_url: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            profile_image_url=profile_image_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
