"""FastAPI dependency injection for the GreenBite API.

Provides dependencies for:
- Database sessions
- Authentication (current user from the session cookie)
- User context for repository scoping
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, AsyncGenerator

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from greenbite.infrastructure.persistence.sqlalchemy.models import Base
from greenbite.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from greenbite.presentation.api.config import get_api_settings
from greenbite_config.settings import Settings, get_settings
from greenbite_identity import (
    AuthenticationService,
    JWTService,
    PasswordHashingService,
    PasswordResetService,
    User,
    UserContext,
)
from greenbite_identity.infrastructure.email import EmailService
from greenbite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
    VerificationCodeRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Name of the HttpOnly cookie carrying the session token
SESSION_COOKIE = "token"

# Bearer tokens are accepted as a fallback for non-browser clients
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Driver options that bound statement and pool wait times."""
    if settings.database_type == "postgresql":
        return {
            "connect_args": {"command_timeout": settings.db_command_timeout},
            "pool_timeout": settings.db_pool_timeout,
        }
    if settings.database_type == "sqlite":
        return {"connect_args": {"timeout": settings.db_command_timeout}}
    return {}


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
        **_engine_options(get_settings()),
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request; routers commit or roll back explicitly.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Identity Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_days=settings.jwt_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_email_service(settings: SettingsDep) -> EmailService:
    return EmailService(settings)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_password_reset_service(
    session: DBSession,
    settings: SettingsDep,
    password_service: PasswordHashingService = Depends(get_password_service),
    email_service: EmailService = Depends(get_email_service),
) -> PasswordResetService:
    return PasswordResetService(
        user_repository=UserRepositorySQLAlchemy(session),
        code_repository=VerificationCodeRepositorySQLAlchemy(session),
        password_service=password_service,
        email_service=email_service,
        code_ttl_minutes=settings.password_reset_code_ttl_minutes,
        require_verified_code=settings.password_reset_require_verified_code,
    )


PasswordResetServiceDep = Annotated[
    PasswordResetService,
    Depends(get_password_reset_service),
]


# -----------------------------------------------------------------------------
# Current User (session token)
# -----------------------------------------------------------------------------


def get_session_token(
    token: Annotated[str | None, Cookie(alias=SESSION_COOKIE)] = None,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Session token from the ``token`` cookie, else from a Bearer header."""
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


SessionToken = Annotated[str | None, Depends(get_session_token)]


async def get_current_user(
    token: SessionToken,
    auth_service: AuthService,
) -> User:
    """
    Resolve the authenticated user for protected routes.

    Raises MissingTokenError or InvalidTokenError, which the exception
    handlers turn into 401 responses.
    """
    return await auth_service.authenticate(token)


CurrentUser = Annotated[User, Depends(get_current_user)]


async def require_admin(user: CurrentUser) -> User:
    if not user.is_admin:
        logger.warning("Non-admin user %s attempted an admin action", user.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


AdminUser = Annotated[User, Depends(require_admin)]


# -----------------------------------------------------------------------------
# User Context & Repository Factory
# -----------------------------------------------------------------------------


async def get_user_context(user: CurrentUser) -> UserContext:
    return UserContext.create(user)


CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    session: DBSession,
    user_context: CurrentUserContext,
) -> SQLAlchemyRepositoryFactory:
    """Repository factory scoped to the authenticated user."""
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_public_repository_factory(
    session: DBSession,
) -> SQLAlchemyRepositoryFactory:
    """Repository factory for anonymous catalog reads."""
    return SQLAlchemyRepositoryFactory(session=session)


PublicRepoFactory = Annotated[
    SQLAlchemyRepositoryFactory,
    Depends(get_public_repository_factory),
]
