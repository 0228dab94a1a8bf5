"""Authentication schemas for request/response models."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from greenbite_identity import User


class SignupRequest(BaseModel):
    """Request schema for account creation."""

    name: str = Field(..., min_length=2, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="Password (6-72 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ann",
                "email": "ann@example.com",
                "password": "secret1",
            },
        },
    )


class SigninRequest(BaseModel):
    """Request schema for signin."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ann@example.com",
                "password": "secret1",
            },
        },
    )


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset code."""

    email: EmailStr


class VerifyCodeRequest(BaseModel):
    """Request schema for checking a password reset code."""

    email: EmailStr
    code: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^\d{6}$",
        description="6-digit code from the reset email",
    )


class ResetPasswordRequest(BaseModel):
    """Request schema for setting a new password."""

    email: EmailStr
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="New password (6-72 characters)",
    )


class UserResponse(BaseModel):
    """Public user fields returned after signup and signin."""

    id: UUID
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(id=user.id, name=user.name, email=user.email)


class AuthResponse(BaseModel):
    """Response schema for signup and signin.

    The session token itself is only sent as the HttpOnly ``token`` cookie.
    """

    user: UserResponse


class ProfileResponse(BaseModel):
    """Response schema for the current user's profile."""

    id: UUID
    name: str
    email: str
    profile_image_url: str | None = None

    @classmethod
    def from_user(cls, user: User) -> ProfileResponse:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            profile_image_url=user.profile_image_url,
        )
