"""Newsletter module: mailing list subscriptions."""

from .models import Subscriber, SubscriptionRequest
from .repository import SubscriberRepository
from .exceptions import AlreadySubscribedError, SubscriptionNotFoundError

__all__ = [
    "Subscriber",
    "SubscriptionRequest",
    "SubscriberRepository",
    "AlreadySubscribedError",
    "SubscriptionNotFoundError",
]
