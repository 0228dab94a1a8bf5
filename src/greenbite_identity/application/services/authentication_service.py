"""Authentication service for signup, signin and session resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.concurrency import run_in_threadpool

from greenbite_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRole,
)
from greenbite_identity.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    WeakPasswordError,
)
from greenbite_identity.schemas import TokenPayload
from greenbite_identity.services import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from greenbite_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and session tokens with the User
    aggregate to provide:
    - Signup (new USER account plus a session token)
    - Signin with email and password, upgrading hashes made with an
      outdated bcrypt cost
    - Resolving a session token back to its user

    bcrypt work runs on the thread pool so hashing never stalls the
    event loop for other requests.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def signup(
        self,
        name: str,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        existing_user = await self._user_repo.find_by_email(email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email)

        password_hash = await run_in_threadpool(self._password_service.hash, password)
        user = User.create(name, email, password_hash, role=UserRole.USER)
        await self._user_repo.save(user)

        token = self._jwt_service.create_token(user.id)

        logger.info("User signed up: %s", email)
        return user, token

    async def signin(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.info("Signin failed for %s: unknown email", email)
            raise InvalidCredentialsError

        is_valid = await run_in_threadpool(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not is_valid:
            logger.info("Signin failed for %s: wrong password", email)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            await self._rehash(user, password)

        token = self._jwt_service.create_token(user.id)

        logger.info("User signed in: %s", email)
        return user, token

    async def _rehash(self, user: User, password: str) -> None:
        try:
            new_hash = await run_in_threadpool(self._password_service.hash, password)
        except WeakPasswordError:
            logger.warning("Kept outdated hash for %s: password below policy", user.id)
            return
        await self._user_repo.update_password_hash(user.id, new_hash)
        logger.info("Rehashed password for %s with the current cost", user.email)

    async def who_am_i(self, token: str | None) -> User:
        """Resolve the session token to the current user's profile.

        Raises
        ------
        MissingTokenError
            If no token was presented
        InvalidTokenError
            If the token is malformed, forged, or expired
        UserNotFoundError
            If the token is valid but its user no longer exists
        """
        payload = self._verify(token)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            raise UserNotFoundError(str(payload.user_id))
        return user

    async def authenticate(self, token: str | None) -> User:
        """Resolve a token for protected routes.

        Unlike who_am_i, a token whose user has been deleted is reported
        as an invalid token.
        """
        payload = self._verify(token)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            msg = "User not found"
            raise InvalidTokenError(msg)
        return user

    def _verify(self, token: str | None) -> TokenPayload:
        if not token:
            raise MissingTokenError
        return self._jwt_service.verify_token(token)
