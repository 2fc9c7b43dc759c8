"""
Bearer token authentication dependency.

Verifies tokens issued at login/registration and exposes the caller
to route handlers as an ``AuthenticatedUser``.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.tokens import TokenIssuer
from shared.models import AuthenticatedUser

from ..dependencies import get_token_issuer

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    claims = tokens.verify(credentials.credentials)
    return AuthenticatedUser(id=claims.sub)
