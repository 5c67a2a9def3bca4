"""
Stripe Decline Codes Models

Enumerations and immutable value objects for the decline code dataset.
"""
from __future__ import annotations

from .enums import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    DeclineCategory,
    Locale,
)
from .decline import (
    DeclineDescription,
    DeclineRecord,
    StripeError,
    Translation,
    locale_key,
)

__all__ = [
    # Enums
    "DeclineCategory",
    "Locale",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    # Records
    "Translation",
    "DeclineRecord",
    "DeclineDescription",
    "StripeError",
    "locale_key",
]
