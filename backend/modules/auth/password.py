"""
Password hashing and verification.

Uses bcrypt with a per-hash random salt embedded in the digest and a
configurable work factor.
"""

import bcrypt

DEFAULT_ROUNDS = 10


class PasswordHasher:
    """One-way password hashing with bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt. Two calls never return the same digest."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, digest: str) -> bool:
        """Constant-time comparison against a bcrypt digest. False for malformed digests."""
        try:
            return bcrypt.checkpw(password.encode(), digest.encode())
        except (ValueError, TypeError, AttributeError):
            return False
