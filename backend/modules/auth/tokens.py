"""
Signed bearer token issuance and verification.

Tokens are HS256 JWTs carrying the user ID (``sub``), issue time and expiry.
Nothing is stored server-side; a token is valid while its signature and
expiry check out.
"""

from datetime import datetime, timedelta, timezone

import jwt

from shared.exceptions import ConfigurationError

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import TokenClaims


class TokenIssuer:
    """
    Issues and verifies signed identity tokens.

    Construct once at startup. A missing secret is a deployment error,
    so it is raised here rather than on the first request.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=30),
    ):
        if not secret:
            raise ConfigurationError(
                "JWT signing secret is not configured. "
                "Set the JWT_SECRET environment variable.",
                setting="JWT_SECRET",
            )
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, user_id: str) -> str:
        """Create a signed token for ``user_id`` that expires after the configured lifetime."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token has expired
            InvalidTokenError: For any other signature or format problem
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError:
            raise InvalidTokenError()

        return TokenClaims(**payload)
