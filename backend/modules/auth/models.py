"""
Authentication module data models.

These models define the request bodies accepted by the auth routes,
the stored user record, and the data returned to clients.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import SuccessResponse
from shared.validators import normalize_email, require_min_length

PASSWORD_MIN_LENGTH = 6
# bcrypt only looks at the first 72 bytes and rejects longer input
PASSWORD_MAX_BYTES = 72


class RegisterRequest(BaseModel):
    """Registration request body."""

    name: str = Field(..., description="Display name, at least 3 characters")
    email: str = Field(..., description="Email address, used as login key")
    password: str = Field(..., description="Plaintext password, at least 6 characters")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_min_length(v, 3, "Name must be at least 3 characters long")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError("Password must be at least 6 characters long")
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError("Password must be at most 72 bytes long")
        return v


class LoginRequest(BaseModel):
    """Login request body."""

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class PublicUser(BaseModel):
    """The user fields that may be returned to clients."""

    id: str
    name: str
    email: str


class User(BaseModel):
    """
    Stored user without credentials.

    This is what the repository returns by default; the password digest
    is only loaded when explicitly requested for login.
    """

    id: str = Field(..., description="User ID (ObjectId string)")
    name: str
    email: str = Field(..., description="Normalized email address")
    created_at: Optional[datetime] = None

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.id, name=self.name, email=self.email)


class UserCredentials(User):
    """Stored user including the password digest. Never serialized to clients."""

    password_digest: str = Field(..., repr=False)


class TokenClaims(BaseModel):
    """Decoded claims of an issued bearer token."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class AuthData(BaseModel):
    """Payload returned by register and login."""

    user: PublicUser
    token: str


class MeData(BaseModel):
    """Payload returned by the current-user endpoint."""

    user: PublicUser


AuthResponse = SuccessResponse[AuthData]
MeResponse = SuccessResponse[MeData]
