"""
Newsletter module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class AlreadySubscribedError(ConflictError):
    """Raised when an email is already on the mailing list."""

    def __init__(self, message: str = "Email already subscribed"):
        super().__init__(message, code="ALREADY_SUBSCRIBED")


class SubscriptionNotFoundError(NotFoundError):
    """Raised when unsubscribing an email that isn't subscribed."""

    def __init__(self, message: str = "Email is not subscribed"):
        super().__init__(message, code="SUBSCRIPTION_NOT_FOUND")
