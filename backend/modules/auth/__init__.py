"""
Authentication module.

Handles registration, login, password hashing and token issuance.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Default implementation
- PasswordHasher, TokenIssuer: Credential primitives
- Auth exceptions: DuplicateEmailError, InvalidCredentialsError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import (
    RegisterRequest,
    LoginRequest,
    User,
    UserCredentials,
    PublicUser,
    AuthData,
    TokenClaims,
)
from .password import PasswordHasher
from .tokens import TokenIssuer
from .service import AuthService
from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Implementations
    "AuthService",
    "PasswordHasher",
    "TokenIssuer",
    # Models
    "RegisterRequest",
    "LoginRequest",
    "User",
    "UserCredentials",
    "PublicUser",
    "AuthData",
    "TokenClaims",
    # Exceptions
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
]
