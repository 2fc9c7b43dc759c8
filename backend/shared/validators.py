"""
Field validators shared by request models.

Each validator raises ValueError with the message shown to the client;
the API error handler turns it into a ``{field, message}`` entry.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

INVALID_EMAIL_MESSAGE = "Please provide a valid email"


def normalize_email(value: Any) -> str:
    """
    Validate an email address and return its normalized form.

    Normalization trims surrounding whitespace and lowercases the whole
    address, so ``" Ann@Example.com "`` becomes ``"ann@example.com"``.
    """
    if not isinstance(value, str):
        raise ValueError(INVALID_EMAIL_MESSAGE)
    candidate = value.strip().lower()
    try:
        result = validate_email(candidate, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(INVALID_EMAIL_MESSAGE)
    return result.normalized


def require_min_length(value: str, minimum: int, message: str) -> str:
    """Trim ``value`` and check it still has at least ``minimum`` characters."""
    value = value.strip()
    if len(value) < minimum:
        raise ValueError(message)
    return value
