"""
Registry Tests

Tests for DeclineCodeRegistry:
- Construction-time validation (keys, records, doc version)
- Exact, case-sensitive lookup that never raises
- Stable code ordering
- Category helpers
- Immutability of the built-in table
"""
from __future__ import annotations

import re

import pytest

from stripe_decline_codes import (
    DECLINE_CODES,
    DOC_VERSION,
    DeclineCategory,
    DeclineCodeRegistry,
    RegistryBuildError,
    get_registry,
)
from stripe_decline_codes.data import create_stripe_decline_codes
from stripe_decline_codes.registry import CODE_PATTERN, validate_doc_version
from tests.conftest import make_record


# =============================================================================
# Construction
# =============================================================================

class TestRegistryConstruction:
    """Registry validates its definition when built."""

    def test_builtin_registry_builds(self, registry):
        assert len(registry) > 0
        assert registry.doc_version == DOC_VERSION

    def test_get_registry_is_singleton(self):
        assert get_registry() is get_registry()

    @pytest.mark.parametrize("bad_key", [
        "",
        "Insufficient_Funds",
        "insufficient-funds",
        "insufficient funds",
        "_leading",
        "trailing_",
        "double__underscore",
        "insufficient_funds\n",
    ])
    def test_malformed_key_rejected(self, bad_key):
        with pytest.raises(RegistryBuildError):
            DeclineCodeRegistry({bad_key: make_record()}, "2024-12-18")

    def test_key_must_match_record_code(self):
        with pytest.raises(RegistryBuildError) as exc_info:
            DeclineCodeRegistry({"other_code": make_record(code="sample_code")}, "2024-12-18")
        assert exc_info.value.decline_code == "other_code"

    def test_value_must_be_record(self):
        with pytest.raises(RegistryBuildError):
            DeclineCodeRegistry({"sample_code": {"code": "sample_code"}}, "2024-12-18")

    def test_duplicate_records_rejected(self):
        with pytest.raises(RegistryBuildError):
            DeclineCodeRegistry.from_records(
                [make_record(), make_record()],
                "2024-12-18",
            )

    @pytest.mark.parametrize("bad_version", ["", "2024-13-01", "2024-02-30", "24-12-18", "2024/12/18", None])
    def test_bad_doc_version_rejected(self, bad_version):
        with pytest.raises(RegistryBuildError):
            DeclineCodeRegistry({}, bad_version)

    def test_validate_doc_version_returns_value(self):
        assert validate_doc_version("2024-12-18") == "2024-12-18"

    def test_empty_registry_allowed(self):
        empty = DeclineCodeRegistry({}, "2024-12-18")
        assert len(empty) == 0
        assert empty.all_codes() == ()
        assert empty.lookup("insufficient_funds") is None


# =============================================================================
# Built-in Dataset Invariants
# =============================================================================

class TestBuiltinDataset:
    """Invariants of the embedded dataset."""

    def test_keys_are_lowercase_underscore_tokens(self, all_codes):
        for code in all_codes:
            assert CODE_PATTERN.fullmatch(code), code

    def test_every_record_has_base_texts(self, registry, all_codes):
        for code in all_codes:
            record = registry.lookup(code)
            assert record.code == code
            assert record.description
            assert record.next_steps
            assert record.next_user_action

    def test_every_record_is_categorized(self, registry, all_codes):
        for code in all_codes:
            assert registry.lookup(code).category in set(DeclineCategory)

    def test_translation_locales_supported(self, registry, all_codes):
        for code in all_codes:
            assert set(registry.lookup(code).translations) <= {"ja"}

    def test_doc_version_format(self, registry):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", registry.doc_version)

    def test_common_codes_present(self, all_codes):
        for code in ("insufficient_funds", "generic_decline", "expired_card", "incorrect_cvc"):
            assert code in all_codes

    def test_definition_order_preserved(self, all_codes):
        assert all_codes == list(create_stripe_decline_codes())


# =============================================================================
# Lookup
# =============================================================================

class TestLookup:
    """Exact, case-sensitive lookup."""

    def test_lookup_valid(self, registry):
        record = registry.lookup("insufficient_funds")
        assert record is not None
        assert record.description == "The card has insufficient funds to complete the purchase."

    @pytest.mark.parametrize("code", [
        "",
        "   ",
        "invalid_code",
        "INSUFFICIENT_FUNDS",
        " insufficient_funds",
        "insufficient_funds ",
        "insufficient_funds\n",
        "残高不足",
        "x" * 10_000,
    ])
    def test_lookup_invalid_string(self, registry, code):
        assert registry.lookup(code) is None
        assert registry.is_valid(code) is False

    @pytest.mark.parametrize("value", [None, 0, 1.5, ["insufficient_funds"], {"a": 1}, object()])
    def test_lookup_non_string_never_raises(self, registry, value):
        assert registry.lookup(value) is None
        assert registry.is_valid(value) is False
        assert registry.category_of(value) is None

    def test_is_valid_consistent_with_lookup(self, registry, all_codes, fuzz_strings):
        for code in all_codes + fuzz_strings:
            assert registry.is_valid(code) == (registry.lookup(code) is not None)

    def test_contains(self, registry):
        assert "insufficient_funds" in registry
        assert "invalid_code" not in registry
        assert None not in registry

    def test_iteration_matches_all_codes(self, registry):
        assert tuple(registry) == registry.all_codes()


# =============================================================================
# Ordering
# =============================================================================

class TestAllCodes:
    """all_codes() is stable and complete."""

    def test_same_sequence_every_call(self, registry):
        first = registry.all_codes()
        for _ in range(10):
            assert registry.all_codes() == first

    def test_no_duplicates(self, all_codes):
        assert len(all_codes) == len(set(all_codes))

    def test_matches_table_keys(self, registry, all_codes):
        assert set(all_codes) == set(registry.codes)
        assert len(all_codes) == len(registry.codes)


# =============================================================================
# Categories
# =============================================================================

class TestCategories:
    """Category helpers."""

    def test_known_categories(self, registry):
        assert registry.category_of("insufficient_funds") is DeclineCategory.SOFT_DECLINE
        assert registry.category_of("fraudulent") is DeclineCategory.HARD_DECLINE

    def test_category_agrees_with_record(self, registry, all_codes):
        for code in all_codes:
            assert registry.category_of(code) is registry.lookup(code).category

    def test_exactly_one_of_hard_or_soft(self, registry, all_codes):
        for code in all_codes:
            assert registry.is_hard_decline(code) != registry.is_soft_decline(code)

    def test_invalid_codes_are_neither(self, registry, fuzz_strings):
        for code in fuzz_strings + [None, ""]:
            assert registry.is_hard_decline(code) is False
            assert registry.is_soft_decline(code) is False

    def test_codes_by_category_partitions(self, registry, all_codes):
        soft = registry.codes_by_category(DeclineCategory.SOFT_DECLINE)
        hard = registry.codes_by_category(DeclineCategory.HARD_DECLINE)
        assert set(soft).isdisjoint(hard)
        assert sorted(soft + hard) == sorted(all_codes)

    def test_codes_by_category_keeps_definition_order(self, registry, all_codes):
        soft = registry.codes_by_category(DeclineCategory.SOFT_DECLINE)
        assert list(soft) == [c for c in all_codes if c in set(soft)]

    def test_codes_by_category_accepts_string(self, registry):
        assert registry.codes_by_category("HARD_DECLINE") == registry.codes_by_category(
            DeclineCategory.HARD_DECLINE
        )


# =============================================================================
# Immutability
# =============================================================================

class TestImmutability:
    """The built-in table cannot be modified."""

    def test_decline_codes_is_read_only(self):
        with pytest.raises(TypeError):
            DECLINE_CODES["new_code"] = make_record(code="new_code")

    def test_decline_codes_cannot_delete(self):
        with pytest.raises(TypeError):
            del DECLINE_CODES["insufficient_funds"]

    def test_source_mapping_mutation_does_not_leak(self):
        source = {"sample_code": make_record()}
        custom = DeclineCodeRegistry(source, "2024-12-18")
        source["other_code"] = make_record(code="other_code")
        assert custom.all_codes() == ("sample_code",)
        assert custom.lookup("other_code") is None

    def test_doc_version_is_read_only(self, registry):
        with pytest.raises(AttributeError):
            registry.doc_version = "2000-01-01"


# =============================================================================
# Fingerprint
# =============================================================================

class TestContentHash:
    """Dataset fingerprint."""

    def test_hash_is_stable(self, registry):
        assert registry.content_hash() == registry.content_hash()
        assert len(registry.content_hash()) == 64

    def test_hash_changes_with_content(self):
        a = DeclineCodeRegistry({"sample_code": make_record()}, "2024-12-18")
        b = DeclineCodeRegistry(
            {"sample_code": make_record(next_user_action="Different.")},
            "2024-12-18",
        )
        assert a.content_hash() != b.content_hash()

    def test_hash_changes_with_doc_version(self):
        a = DeclineCodeRegistry({"sample_code": make_record()}, "2024-12-18")
        b = DeclineCodeRegistry({"sample_code": make_record()}, "2025-01-01")
        assert a.content_hash() != b.content_hash()

    def test_repr(self, registry):
        assert repr(registry) == (
            f"DeclineCodeRegistry(codes={len(registry)}, doc_version='{DOC_VERSION}')"
        )
