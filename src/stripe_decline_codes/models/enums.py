"""
Stripe Decline Codes Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Decline Category
# =============================================================================

class DeclineCategory(str, Enum):
    """
    Retry classification of a decline code.

    SOFT declines are transient and a retry may succeed.
    HARD declines are permanent and must not be retried.
    """
    SOFT_DECLINE = "SOFT_DECLINE"
    HARD_DECLINE = "HARD_DECLINE"

    @property
    def retryable(self) -> bool:
        return self is DeclineCategory.SOFT_DECLINE


# =============================================================================
# Locale
# =============================================================================

class Locale(str, Enum):
    """Languages available for user-facing text."""
    EN = "en"
    JA = "ja"


DEFAULT_LOCALE = Locale.EN

SUPPORTED_LOCALES: tuple[str, ...] = tuple(locale.value for locale in Locale)


__all__ = [
    "DeclineCategory",
    "Locale",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
]
