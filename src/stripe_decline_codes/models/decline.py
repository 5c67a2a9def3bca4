"""
Decline Code Models

Immutable value objects for the decline code dataset:
- Translation: per-locale override of the customer-facing texts
- DeclineRecord: everything known about one decline code
- DeclineDescription: result of a description lookup (doc version + record)
- StripeError: the subset of a Stripe error payload this package reads

Records validate themselves on construction. Once built they cannot be
changed: dataclasses are frozen and the translations mapping is read-only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..exceptions import InvalidDeclineRecordError, UnsupportedLocaleError
from .enums import SUPPORTED_LOCALES, DeclineCategory, Locale


def locale_key(locale: Any) -> Optional[str]:
    """
    Reduce a locale argument to the plain string used as a translations key.

    Accepts a Locale member or its string value. Anything that is not a
    string yields None, which never matches a translation.
    """
    if isinstance(locale, Locale):
        return locale.value
    if isinstance(locale, str):
        return locale
    return None


# =============================================================================
# Translation
# =============================================================================

@dataclass(frozen=True)
class Translation:
    """
    Localized texts for one locale.

    Only the description and the customer-facing message are localized.
    Merchant next steps stay in the base locale.
    """
    description: str
    next_user_action: str

    def __post_init__(self) -> None:
        if not self.description:
            raise InvalidDeclineRecordError("translation description cannot be empty")
        if not self.next_user_action:
            raise InvalidDeclineRecordError("translation next_user_action cannot be empty")

    def to_dict(self) -> dict[str, str]:
        return {
            "description": self.description,
            "nextUserAction": self.next_user_action,
        }


# =============================================================================
# Decline Record
# =============================================================================

@dataclass(frozen=True)
class DeclineRecord:
    """
    Definition of a single Stripe decline code.

    Attributes:
        code: The decline code (e.g., "insufficient_funds")
        category: SOFT_DECLINE or HARD_DECLINE
        description: Technical description of why the payment was declined
        next_steps: Recommended next steps for the merchant (not localized)
        next_user_action: Message that can be shown to the customer
        translations: Locale -> Translation overrides (may be empty or partial)
    """
    code: str
    category: DeclineCategory
    description: str
    next_steps: str
    next_user_action: str
    translations: Mapping[str, Translation] = field(
        default_factory=lambda: MappingProxyType({}),
        hash=False,
    )

    def __post_init__(self) -> None:
        """Validate the record and freeze its translations."""
        if not self.code:
            raise InvalidDeclineRecordError("code cannot be empty")

        if not isinstance(self.category, DeclineCategory):
            try:
                object.__setattr__(self, "category", DeclineCategory(self.category))
            except ValueError:
                raise InvalidDeclineRecordError(
                    f"unknown category: {self.category!r}",
                    decline_code=self.code,
                ) from None

        for name in ("description", "next_steps", "next_user_action"):
            if not getattr(self, name):
                raise InvalidDeclineRecordError(
                    f"{name} cannot be empty",
                    decline_code=self.code,
                )

        frozen: dict[str, Translation] = {}
        for locale, translation in (self.translations or {}).items():
            key = locale_key(locale)
            if key not in SUPPORTED_LOCALES:
                raise UnsupportedLocaleError(
                    f"unsupported translation locale: {locale!r}",
                    decline_code=self.code,
                    details={"supported": list(SUPPORTED_LOCALES)},
                )
            if not isinstance(translation, Translation):
                raise InvalidDeclineRecordError(
                    f"translation for {key!r} must be a Translation",
                    decline_code=self.code,
                )
            frozen[key] = translation
        object.__setattr__(self, "translations", MappingProxyType(frozen))

    @property
    def is_hard(self) -> bool:
        return self.category is DeclineCategory.HARD_DECLINE

    @property
    def is_soft(self) -> bool:
        return self.category is DeclineCategory.SOFT_DECLINE

    def translation_for(self, locale: Any) -> Optional[Translation]:
        """Return the override for a locale, or None when there is none."""
        key = locale_key(locale)
        if key is None:
            return None
        return self.translations.get(key)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the documentation shape."""
        return {
            "code": self.code,
            "category": self.category.value,
            "description": self.description,
            "nextSteps": self.next_steps,
            "nextUserAction": self.next_user_action,
            "translations": {
                locale: translation.to_dict()
                for locale, translation in self.translations.items()
            },
        }


# =============================================================================
# Description Result
# =============================================================================

@dataclass(frozen=True)
class DeclineDescription:
    """
    Result of a description lookup.

    ``record`` is None when the code is missing or unknown. ``doc_version``
    is always set.
    """
    doc_version: str
    record: Optional[DeclineRecord] = None

    @property
    def found(self) -> bool:
        return self.record is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "docVersion": self.doc_version,
            "code": self.record.to_dict() if self.record is not None else {},
        }


# =============================================================================
# Stripe Error
# =============================================================================

@dataclass(frozen=True)
class StripeError:
    """
    Fields of a Stripe API error object.

    Only ``decline_code`` is used for message resolution.
    """
    type: Optional[str] = None
    decline_code: Optional[str] = None
    message: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StripeError":
        """
        Build from a Stripe error body.

        Accepts either the error object itself or the full response body
        ``{"error": {...}}``.
        """
        body = data.get("error", data)
        if not isinstance(body, Mapping):
            body = {}
        return cls(
            type=body.get("type"),
            decline_code=body.get("decline_code"),
            message=body.get("message"),
            code=body.get("code"),
        )


__all__ = [
    "locale_key",
    "Translation",
    "DeclineRecord",
    "DeclineDescription",
    "StripeError",
]
