"""
Stripe Decline Codes: Public Accessors

Every function here is a pure read over a DeclineCodeRegistry (the built-in
one unless ``registry`` is given). Unknown or malformed input yields None,
False or an empty description; nothing raises.

Locale resolution:
1. Unknown code -> None
2. The record has a translation for the locale -> the translated message
3. Otherwise -> the base-locale (English) message

There is no chained fallback between non-base locales.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .formatting import render_template
from .models import DEFAULT_LOCALE, DeclineCategory, DeclineDescription, Locale, StripeError
from .registry import DeclineCodeRegistry, get_registry

LocaleArg = Union[Locale, str]


def _registry(registry: Optional[DeclineCodeRegistry]) -> DeclineCodeRegistry:
    return registry if registry is not None else get_registry()


# =============================================================================
# Descriptions
# =============================================================================

def get_decline_description(
    code: Optional[str] = None,
    *,
    registry: Optional[DeclineCodeRegistry] = None,
) -> DeclineDescription:
    """
    Get decline code information with description and recommended actions.

    Args:
        code: The Stripe decline code to look up

    Returns:
        DeclineDescription whose ``record`` is None when the code is missing
        or unknown. ``doc_version`` is always set.

    Example:
        >>> get_decline_description("insufficient_funds").record.description
        'The card has insufficient funds to complete the purchase.'
    """
    table = _registry(registry)
    return DeclineDescription(doc_version=table.doc_version, record=table.lookup(code))


def get_doc_version(*, registry: Optional[DeclineCodeRegistry] = None) -> str:
    """Get the Stripe documentation version (YYYY-MM-DD) of the dataset."""
    return _registry(registry).doc_version


# =============================================================================
# Localized Messages
# =============================================================================

def get_decline_message(
    code: Optional[str],
    locale: LocaleArg = DEFAULT_LOCALE,
    *,
    registry: Optional[DeclineCodeRegistry] = None,
) -> Optional[str]:
    """
    Get the customer-facing message for a decline code.

    Args:
        code: The Stripe decline code
        locale: "en" (default) or "ja"; other values fall back to English

    Returns:
        The message, or None if the code is unknown

    Example:
        >>> get_decline_message("insufficient_funds", "ja")
        '別のお支払い方法を使用してもう一度お試しください。'
    """
    record = _registry(registry).lookup(code)
    if record is None:
        return None
    translation = record.translation_for(locale)
    if translation is not None:
        return translation.next_user_action
    return record.next_user_action


def _extract_decline_code(error: Any) -> Optional[str]:
    if error is None:
        return None
    if isinstance(error, StripeError):
        return error.decline_code
    if isinstance(error, Mapping):
        return StripeError.from_dict(error).decline_code

    decline_code = getattr(error, "decline_code", None)
    if decline_code is not None:
        return decline_code

    # stripe SDK exceptions (e.g. CardError) keep it on .error and in .json_body
    nested = getattr(error, "error", None)
    if isinstance(nested, Mapping):
        decline_code = StripeError.from_dict(nested).decline_code
    elif nested is not None:
        decline_code = getattr(nested, "decline_code", None)
    if decline_code is not None:
        return decline_code

    json_body = getattr(error, "json_body", None)
    if isinstance(json_body, Mapping):
        return StripeError.from_dict(json_body).decline_code
    return None


def get_message_from_stripe_error(
    error: Any,
    locale: LocaleArg = DEFAULT_LOCALE,
    *,
    registry: Optional[DeclineCodeRegistry] = None,
) -> Optional[str]:
    """
    Extract a localized message from a Stripe error.

    Only ``decline_code`` is read. The error may be a StripeError, a mapping
    (the error object or a full ``{"error": {...}}`` response body), an
    object with a ``decline_code`` attribute, or a stripe SDK exception
    carrying it on ``.error`` or in ``.json_body``.

    Returns:
        The message, or None if the decline code is missing or unknown
    """
    decline_code = _extract_decline_code(error)
    if decline_code is None:
        return None
    return get_decline_message(decline_code, locale, registry=registry)


def format_decline_message(
    code: Optional[str],
    locale: LocaleArg = DEFAULT_LOCALE,
    variables: Optional[Mapping[str, Any]] = None,
    *,
    registry: Optional[DeclineCodeRegistry] = None,
) -> Optional[str]:
    """
    Format a decline message with ``{{name}}`` template variables.

    Without variables the result is exactly get_decline_message(code, locale).
    Variables never make an unknown code resolve.

    Example:
        >>> format_decline_message("insufficient_funds", "en", {"merchantName": "Acme Store"})
        'Please try again using an alternative payment method.'
    """
    message = get_decline_message(code, locale, registry=registry)
    if message is None:
        return None
    return render_template(message, variables)


# =============================================================================
# Codes and Categories
# =============================================================================

def get_all_decline_codes(*, registry: Optional[DeclineCodeRegistry] = None) -> list[str]:
    """Get all decline codes, in the same order on every call."""
    return list(_registry(registry).all_codes())


def is_valid_decline_code(
    code: Any,
    *,
    registry: Optional[DeclineCodeRegistry] = None,
) -> bool:
    """Check if a decline code exists in the dataset (exact, case-sensitive)."""
    return _registry(registry).is_valid(code)


def get_decline_category(
    code: Any,
    *,
    registry: Optional[DeclineCodeRegistry] = None,
) -> Optional[DeclineCategory]:
    """Get SOFT_DECLINE or HARD_DECLINE for a code, or None if it is unknown."""
    return _registry(registry).category_of(code)


def is_hard_decline(code: Any, *, registry: Optional[DeclineCodeRegistry] = None) -> bool:
    """True if the code is a hard decline (permanent, do not retry)."""
    return _registry(registry).is_hard_decline(code)


def is_soft_decline(code: Any, *, registry: Optional[DeclineCodeRegistry] = None) -> bool:
    """True if the code is a soft decline (temporary, may retry)."""
    return _registry(registry).is_soft_decline(code)


__all__ = [
    "get_decline_description",
    "get_doc_version",
    "get_decline_message",
    "get_message_from_stripe_error",
    "format_decline_message",
    "get_all_decline_codes",
    "is_valid_decline_code",
    "get_decline_category",
    "is_hard_decline",
    "is_soft_decline",
]
