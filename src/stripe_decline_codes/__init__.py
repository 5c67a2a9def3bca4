"""
Stripe Decline Codes - Decline Code Lookup and Localized Messages

Looks up Stripe decline codes and returns what they mean, what the merchant
should do next, and a message that can be shown to the customer in English
or Japanese.

Key Features:
- Embedded, read-only dataset of Stripe decline codes
- Soft/hard decline classification for retry decisions
- Customer messages in "en" and "ja" with fallback to English
- ``{{name}}`` template variables in messages
- Offline documentation exporter (``stripe-decline-codes generate``)

Quick Start:
    from stripe_decline_codes import (
        get_decline_description, get_decline_message, is_hard_decline,
    )

    info = get_decline_description("insufficient_funds")
    info.record.next_steps
    # => "The customer should use an alternative payment method."

    get_decline_message("insufficient_funds", "ja")
    # => "別のお支払い方法を使用してもう一度お試しください。"

    is_hard_decline("fraudulent")
    # => True

Unknown codes never raise: accessors return None, False, or a description
whose ``record`` is None.

Version: 1.0.0
"""
from __future__ import annotations

__version__ = "1.0.0"
__author__ = "Stripe Decline Codes Contributors"
__description__ = (
    "Complete database of Stripe decline codes with descriptions and localized messages"
)
__license__ = "MIT"
__repository__ = "https://github.com/hideokamoto/stripe-decline-codes"

# =============================================================================
# Models
# =============================================================================
from .models import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    DeclineCategory,
    DeclineDescription,
    DeclineRecord,
    Locale,
    StripeError,
    Translation,
)

# =============================================================================
# Registry
# =============================================================================
from .data import DOC_VERSION
from .registry import (
    DECLINE_CODES,
    DeclineCodeRegistry,
    get_registry,
)

# =============================================================================
# Accessors
# =============================================================================
from .messages import (
    format_decline_message,
    get_all_decline_codes,
    get_decline_category,
    get_decline_description,
    get_decline_message,
    get_doc_version,
    get_message_from_stripe_error,
    is_hard_decline,
    is_soft_decline,
    is_valid_decline_code,
)
from .formatting import find_placeholders, render_template

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    DeclineCodesError,
    DocsExportError,
    InvalidDeclineRecordError,
    RegistryBuildError,
    UnsupportedLocaleError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
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
    # Registry
    "DOC_VERSION",
    "DECLINE_CODES",
    "DeclineCodeRegistry",
    "get_registry",
    # Accessors
    "get_decline_description",
    "get_decline_message",
    "get_all_decline_codes",
    "is_valid_decline_code",
    "get_doc_version",
    "format_decline_message",
    "get_decline_category",
    "is_hard_decline",
    "is_soft_decline",
    "get_message_from_stripe_error",
    # Templates
    "find_placeholders",
    "render_template",
    # Exceptions
    "DeclineCodesError",
    "RegistryBuildError",
    "InvalidDeclineRecordError",
    "UnsupportedLocaleError",
    "DocsExportError",
]
