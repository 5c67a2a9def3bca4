"""
Tests for canonical JSON serialization and dataset fingerprints.
"""
from datetime import date
from types import MappingProxyType

import pytest

from stripe_decline_codes import DeclineCategory, StripeError, Translation
from stripe_decline_codes.canon import (
    canonical_json,
    canonical_json_bytes,
    content_hash,
    content_hash_short,
)
from tests.conftest import make_record


class TestCanonicalJson:
    """Tests for canonical_json."""

    def test_sorted_compact(self):
        assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def test_non_ascii_preserved(self):
        assert canonical_json({"ja": "カード"}) == '{"ja":"カード"}'
        assert canonical_json_bytes({"ja": "カード"}) == '{"ja":"カード"}'.encode("utf-8")

    def test_enum(self):
        assert canonical_json({"category": DeclineCategory.HARD_DECLINE}) == (
            '{"category":"HARD_DECLINE"}'
        )

    def test_mapping_proxy(self):
        assert canonical_json({"m": MappingProxyType({"x": 1})}) == '{"m":{"x":1}}'

    def test_dataclass_uses_to_dict(self):
        t = Translation(description="説明", next_user_action="メッセージ")
        assert canonical_json(t) == '{"description":"説明","nextUserAction":"メッセージ"}'

    def test_dataclass_without_to_dict(self):
        error = StripeError(type="card_error", decline_code="insufficient_funds")
        assert canonical_json(error) == (
            '{"code":null,"decline_code":"insufficient_funds","message":null,"type":"card_error"}'
        )

    def test_record_translations_serialized(self):
        record = make_record(translations={
            "ja": Translation(description="説明", next_user_action="メッセージ"),
        })
        assert '"translations":{"ja":{"description":"説明","nextUserAction":"メッセージ"}}' in (
            canonical_json(record)
        )

    @pytest.mark.parametrize("value", [object(), date(2024, 12, 18), {"a", "b"}])
    def test_unsupported_type(self, value):
        with pytest.raises(TypeError):
            canonical_json({"x": value})


class TestContentHash:
    """Tests for content_hash."""

    def test_key_order_irrelevant(self):
        assert content_hash({"a": 1, "b": 2}) == content_hash({"b": 2, "a": 1})

    def test_hex_length(self):
        assert len(content_hash({})) == 64
        assert content_hash_short({}) == content_hash({})[:12]

    def test_record_hash_tracks_content(self):
        assert content_hash(make_record()) == content_hash(make_record())
        assert content_hash(make_record()) != content_hash(make_record(description="Other."))
