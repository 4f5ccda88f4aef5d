"""Request/response schemas for registration, login and user endpoints."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, field_validator

from storefront.schemas.role import RoleName

# Min/max lengths for username, email and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
EMAIL_MIN_LEN = 3
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128
ROLE_NAME_MAX_LEN = 32

# Identifiers are trimmed; passwords are kept exactly as sent.
Username = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN
    ),
]
Email = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        to_lower=True,
        min_length=EMAIL_MIN_LEN,
        max_length=EMAIL_MAX_LEN,
    ),
]
Password = Annotated[
    str, StringConstraints(min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
]


def _require_at_sign(v: str) -> str:
    if "@" not in v:
        raise ValueError("email must be a valid email address")
    return v


class TokenClaims(BaseModel):
    """Identity claims carried by an access token. subject_id is the trusted identity."""

    subject_id: int
    email: str
    role: str


class CurrentUser(BaseModel):
    """User resolved from the store for the token's subject, with its live role."""

    id: int
    username: str
    email: str
    role: RoleName


class RegisterRequest(BaseModel):
    """Body for POST /user/register. All four fields are required."""

    username: Username = Field(..., description="Unique username")
    email: Email = Field(..., description="Unique email address")
    password: Password = Field(..., description="Password")
    role: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=ROLE_NAME_MAX_LEN)
    ] = Field(..., description="Role name (user or admin)")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _require_at_sign(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True, to_lower=True, min_length=1, max_length=EMAIL_MAX_LEN
        ),
    ] = Field(..., description="Email")
    password: Password = Field(..., description="Password")


class UserUpdate(BaseModel):
    """Partial update for PUT /user/{id}. Role is not editable through this route."""

    model_config = {"extra": "forbid"}

    username: Username | None = None
    email: Email | None = None
    password: Password | None = None

    @field_validator("username", "email", "password")
    @classmethod
    def reject_null(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _require_at_sign(v)


class UserSummary(BaseModel):
    """Public view of a user (no password hash)."""

    id: int
    username: str
    email: str
    role: str


class LoginResponse(BaseModel):
    message: str = "Login successful!"
    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserSummary


class MessageResponse(BaseModel):
    message: str
