"""Authentication router: signup, signin, session lookup and password reset."""

import logging

from fastapi import APIRouter, Response, status

from greenbite.presentation.api.dependencies import (
    SESSION_COOKIE,
    AuthService,
    DBSession,
    PasswordResetServiceDep,
    SessionToken,
    SettingsDep,
)
from greenbite.presentation.api.errors import internal_error
from greenbite.presentation.api.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    ProfileResponse,
    ResetPasswordRequest,
    SigninRequest,
    SignupRequest,
    UserResponse,
    VerifyCodeRequest,
)
from greenbite.presentation.api.schemas.common import ErrorResponse, MessageResponse
from greenbite_config.settings import Settings
from greenbite_identity import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidOrExpiredCodeError,
    InvalidUserNameError,
    UserNotFoundError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Set the session token as an HttpOnly cookie.

    This cookie is:
    - HttpOnly: Not accessible to JavaScript
    - Secure: Only sent over HTTPS in production (or when forced by config)
    - SameSite=lax: Not sent on cross-site subrequests
    """
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=settings.session_max_age_seconds,
        path="/",
        domain=settings.api_cookie_domain,
    )


def _clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE,
        path="/",
        domain=settings.api_cookie_domain,
        secure=settings.cookie_secure,
        httponly=True,
        samesite="lax",
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account created, session cookie set"},
        400: {"model": ErrorResponse, "description": "Email taken or invalid input"},
    },
)
async def signup(
    request: SignupRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Register a new customer account.

    The password is stored only as a bcrypt hash. On success the session
    token is set as the `token` cookie.
    """
    try:
        user, token = await auth_service.signup(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except (
        EmailAlreadyExistsError,
        InvalidEmailError,
        InvalidUserNameError,
        WeakPasswordError,
    ):
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("signup", e, email=request.email) from e

    _set_session_cookie(response, token, settings)
    return AuthResponse(user=UserResponse.from_user(user))


@router.post(
    "/signin",
    summary="Sign in",
    responses={
        200: {"description": "Signed in, session cookie set"},
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def signin(
    request: SigninRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    An unknown email and a wrong password produce the same response.
    """
    try:
        user, token = await auth_service.signin(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except InvalidCredentialsError:
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("signin", e, email=request.email) from e

    _set_session_cookie(response, token, settings)
    return AuthResponse(user=UserResponse.from_user(user))


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user's profile"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def me(token: SessionToken, auth_service: AuthService) -> ProfileResponse:
    """Return the profile of the user owning the session cookie."""
    user = await auth_service.who_am_i(token)
    return ProfileResponse.from_user(user)


@router.post(
    "/signout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
)
async def signout(settings: SettingsDep) -> Response:
    """Clear the session cookie. Tokens are stateless, so nothing else changes."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    _clear_session_cookie(response, settings)
    return response


@router.post(
    "/forgot-password",
    summary="Request a password reset code",
    responses={
        200: {"description": "Reset code sent"},
        404: {"model": ErrorResponse, "description": "No account for this email"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: PasswordResetServiceDep,
    session: DBSession,
) -> MessageResponse:
    """
    Email a 6-digit reset code, valid for 10 minutes by default.

    A new request replaces any code issued earlier for the same email.
    """
    try:
        await reset_service.forgot_password(request.email)
        await session.commit()
    except UserNotFoundError:
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("forgot-password", e, email=request.email) from e

    return MessageResponse(message="Reset code sent to email")


@router.post(
    "/verify-code",
    summary="Check a password reset code",
    responses={
        200: {"description": "Code is valid"},
        400: {"model": ErrorResponse, "description": "Invalid or expired code"},
    },
)
async def verify_code(
    request: VerifyCodeRequest,
    reset_service: PasswordResetServiceDep,
    session: DBSession,
) -> MessageResponse:
    try:
        await reset_service.verify_code(request.email, request.code)
        await session.commit()
    except InvalidOrExpiredCodeError:
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("verify-code", e, email=request.email) from e

    return MessageResponse(message="Code verified")


@router.post(
    "/reset-password",
    summary="Set a new password",
    responses={
        200: {"description": "Password changed"},
        400: {"model": ErrorResponse, "description": "Invalid password or code"},
        404: {"model": ErrorResponse, "description": "No account for this email"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: PasswordResetServiceDep,
    session: DBSession,
) -> MessageResponse:
    """
    Replace the password and discard every reset code for the email.
    """
    try:
        await reset_service.reset_password(request.email, request.password)
        await session.commit()
    except (UserNotFoundError, InvalidOrExpiredCodeError, WeakPasswordError):
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("reset-password", e, email=request.email) from e

    logger.info("Password reset for %s", request.email)
    return MessageResponse(message="Password reset successfully")
