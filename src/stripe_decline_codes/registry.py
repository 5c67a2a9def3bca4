"""
Stripe Decline Codes: Registry Module

The registry is the read-only table of decline codes every accessor reads
from.

Key components:
- DeclineCodeRegistry: validated, immutable code -> DeclineRecord mapping
- get_registry(): the process-wide registry built from the embedded dataset

Design Principles:
- Built once: the default registry is constructed at import time
- Read-only: the table is a mapping proxy over frozen records
- Exact keys: lookup is case-sensitive and never trims or normalizes input
- Total: queries return None/False for any input instead of raising

Example:
    >>> registry = get_registry()
    >>> registry.lookup("insufficient_funds").category
    <DeclineCategory.SOFT_DECLINE: 'SOFT_DECLINE'>
    >>> registry.is_valid("INSUFFICIENT_FUNDS")
    False
"""

from __future__ import annotations

import logging
import re
from datetime import date
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from .canon import content_hash
from .data import DOC_VERSION, create_stripe_decline_codes
from .exceptions import RegistryBuildError
from .models import DeclineCategory, DeclineRecord

logger = logging.getLogger(__name__)


# Lowercase alphanumeric words joined by single underscores.
CODE_PATTERN = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*")

DOC_VERSION_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_doc_version(doc_version: str) -> str:
    """
    Check that a doc version is a real calendar date in YYYY-MM-DD form.

    Raises:
        RegistryBuildError: If the version is malformed
    """
    if not isinstance(doc_version, str) or not DOC_VERSION_PATTERN.fullmatch(doc_version):
        raise RegistryBuildError(
            f"doc_version must be YYYY-MM-DD, got {doc_version!r}",
        )
    try:
        date.fromisoformat(doc_version)
    except ValueError:
        raise RegistryBuildError(
            f"doc_version is not a valid date: {doc_version!r}",
        ) from None
    return doc_version


# =============================================================================
# Decline Code Registry
# =============================================================================

class DeclineCodeRegistry:
    """
    Immutable table of decline codes.

    The constructor validates every entry; after that, no method mutates
    the registry. Query methods accept any value and answer None/False for
    anything that is not an exact key.

    Usage:
        >>> registry = DeclineCodeRegistry(create_stripe_decline_codes(), DOC_VERSION)
        >>> registry.category_of("fraudulent")
        <DeclineCategory.HARD_DECLINE: 'HARD_DECLINE'>
    """

    def __init__(self, codes: Mapping[str, DeclineRecord], doc_version: str) -> None:
        """
        Build a registry from a code -> record mapping.

        Args:
            codes: Records keyed by decline code, in the order they should be listed
            doc_version: Stripe documentation revision (YYYY-MM-DD)

        Raises:
            RegistryBuildError: If a key is malformed, a value is not a
                DeclineRecord, or a key disagrees with its record's code
        """
        self._doc_version = validate_doc_version(doc_version)

        table: dict[str, DeclineRecord] = {}
        for key, record in codes.items():
            if not isinstance(key, str) or not CODE_PATTERN.fullmatch(key):
                raise RegistryBuildError(
                    f"invalid decline code key: {key!r}",
                    details={"pattern": CODE_PATTERN.pattern},
                )
            if not isinstance(record, DeclineRecord):
                raise RegistryBuildError(
                    f"value for {key!r} must be a DeclineRecord",
                    decline_code=key,
                )
            if record.code != key:
                raise RegistryBuildError(
                    f"key {key!r} does not match record code {record.code!r}",
                    decline_code=key,
                )
            table[key] = record

        self._codes: Mapping[str, DeclineRecord] = MappingProxyType(table)
        self._order: tuple[str, ...] = tuple(table)

        logger.debug(
            "Built decline code registry: %d codes, doc version %s",
            len(self._order),
            self._doc_version,
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[DeclineRecord],
        doc_version: str,
    ) -> "DeclineCodeRegistry":
        """
        Build a registry from a sequence of records.

        Raises:
            RegistryBuildError: If two records share a code
        """
        codes: dict[str, DeclineRecord] = {}
        for record in records:
            if record.code in codes:
                raise RegistryBuildError(
                    f"duplicate decline code: {record.code!r}",
                    decline_code=record.code,
                )
            codes[record.code] = record
        return cls(codes, doc_version)

    # -------------------------------------------------------------------------
    # Metadata
    # -------------------------------------------------------------------------

    @property
    def doc_version(self) -> str:
        return self._doc_version

    @property
    def codes(self) -> Mapping[str, DeclineRecord]:
        """Read-only view of the table."""
        return self._codes

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __contains__(self, code: object) -> bool:
        return self.is_valid(code)

    def __repr__(self) -> str:
        return f"DeclineCodeRegistry(codes={len(self)}, doc_version={self._doc_version!r})"

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup(self, code: Any) -> Optional[DeclineRecord]:
        """
        Get the record for a decline code.

        The match is exact and case-sensitive. Whitespace is not trimmed.

        Returns:
            The DeclineRecord, or None if ``code`` is not a key
        """
        if not isinstance(code, str):
            return None
        return self._codes.get(code)

    def is_valid(self, code: Any) -> bool:
        """Check whether ``code`` is a key of this registry."""
        return self.lookup(code) is not None

    def all_codes(self) -> tuple[str, ...]:
        """Every decline code, in definition order."""
        return self._order

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    def category_of(self, code: Any) -> Optional[DeclineCategory]:
        record = self.lookup(code)
        if record is None:
            return None
        return record.category

    def is_hard_decline(self, code: Any) -> bool:
        return self.category_of(code) is DeclineCategory.HARD_DECLINE

    def is_soft_decline(self, code: Any) -> bool:
        return self.category_of(code) is DeclineCategory.SOFT_DECLINE

    def codes_by_category(self, category: DeclineCategory) -> tuple[str, ...]:
        """
        Get all codes in a category, in definition order.

        Args:
            category: The category to filter by

        Returns:
            Tuple of decline codes (empty for an unknown category)
        """
        return tuple(
            code for code in self._order
            if self._codes[code].category == category
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize the registry to the documentation shape."""
        return {
            "version": self._doc_version,
            "codes": [self._codes[code].to_dict() for code in self._order],
        }

    def content_hash(self) -> str:
        """SHA-256 fingerprint of the registry contents."""
        return content_hash(self.to_dict())


# =============================================================================
# Default Registry
# =============================================================================

_DEFAULT_REGISTRY = DeclineCodeRegistry(create_stripe_decline_codes(), DOC_VERSION)

# Read-only view of the built-in table.
DECLINE_CODES: Mapping[str, DeclineRecord] = _DEFAULT_REGISTRY.codes


def get_registry() -> DeclineCodeRegistry:
    """Return the process-wide registry built from the embedded dataset."""
    return _DEFAULT_REGISTRY


__all__ = [
    "CODE_PATTERN",
    "DOC_VERSION_PATTERN",
    "validate_doc_version",
    "DeclineCodeRegistry",
    "DECLINE_CODES",
    "get_registry",
]
