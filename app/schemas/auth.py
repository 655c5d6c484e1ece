"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security import TOKEN_TYPE

USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 50
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


def _not_blank(value: str, field_name: str) -> str:
    if not value.strip():
        raise ValueError(f"{field_name} is required")
    return value


class SignupRequest(BaseModel):
    """New account details."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return _not_blank(v, "Username")

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LEN:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LEN} characters")
        return v

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        return _not_blank(v, "Password")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return _not_blank(v, "Username")


class JwtResponse(BaseModel):
    """Bearer token returned after successful login."""

    token: str = Field(..., description="JWT access token")
    type: str = Field(default=TOKEN_TYPE, description="Token type")
    username: str
    email: str
