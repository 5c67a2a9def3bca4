"""
Stripe Decline Codes Exception Hierarchy

Errors raised while building a registry or exporting documentation.
Query functions never raise: an unknown code is reported as ``None``.

Exception codes follow the pattern: SDC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class DeclineCodesError(Exception):
    """
    Base exception for all stripe_decline_codes errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (SDC_*)
        details: Additional context about the error
        decline_code: Associated decline code if applicable
    """
    message: str
    code: str = "SDC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    decline_code: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.decline_code:
            parts.append(f"(decline code: {self.decline_code})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/CLI output."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.decline_code:
            result["decline_code"] = self.decline_code
        return result


# =============================================================================
# Registry Errors
# =============================================================================

@dataclass
class RegistryBuildError(DeclineCodesError):
    """Registry definition is inconsistent (bad key, duplicate, mismatch)."""
    code: str = "SDC_REGISTRY_BUILD_ERROR"


@dataclass
class InvalidDeclineRecordError(DeclineCodesError):
    """A decline record is missing required text or has a bad category."""
    code: str = "SDC_INVALID_RECORD"


@dataclass
class UnsupportedLocaleError(DeclineCodesError):
    """A translation is keyed by a locale outside the supported set."""
    code: str = "SDC_UNSUPPORTED_LOCALE"


# =============================================================================
# Documentation Export Errors
# =============================================================================

@dataclass
class DocsExportError(DeclineCodesError):
    """Documentation artifact could not be built or written."""
    code: str = "SDC_DOCS_EXPORT_ERROR"


__all__ = [
    "DeclineCodesError",
    "RegistryBuildError",
    "InvalidDeclineRecordError",
    "UnsupportedLocaleError",
    "DocsExportError",
]
