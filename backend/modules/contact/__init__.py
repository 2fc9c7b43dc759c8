"""Contact module: stores messages sent through the contact form."""

from .models import ContactMessage, ContactRequest
from .repository import ContactRepository

__all__ = ["ContactMessage", "ContactRequest", "ContactRepository"]
