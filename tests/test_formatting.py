"""
Template Tests

Tests for {{placeholder}} discovery and substitution.
"""
from __future__ import annotations

import pytest

from stripe_decline_codes import find_placeholders, render_template


# =============================================================================
# Placeholder Discovery
# =============================================================================

class TestFindPlaceholders:
    """Tests for find_placeholders."""

    def test_none(self):
        assert find_placeholders("Please try again.") == ()

    def test_in_order(self):
        assert find_placeholders("{{merchantName}} at {{supportEmail}}") == (
            "merchantName",
            "supportEmail",
        )

    def test_duplicates_listed_once(self):
        assert find_placeholders("{{a}} {{b}} {{a}}") == ("a", "b")

    @pytest.mark.parametrize("template", [
        "{merchantName}",
        "{{ merchantName }}",
        "{{merchant-name}}",
        "{{}}",
        "{{merchantName",
    ])
    def test_malformed_placeholders_ignored(self, template):
        assert find_placeholders(template) == ()

    def test_word_characters(self):
        assert find_placeholders("{{support_email_2}}") == ("support_email_2",)

    def test_builtin_messages_have_no_placeholders(self, registry, all_codes):
        for code in all_codes:
            record = registry.lookup(code)
            assert find_placeholders(record.next_user_action) == ()


# =============================================================================
# Substitution
# =============================================================================

class TestRenderTemplate:
    """Tests for render_template."""

    def test_no_variables_returns_template(self):
        template = "Contact {{merchantName}}."
        assert render_template(template) is template
        assert render_template(template, {}) is template

    def test_substitution(self):
        assert render_template("Contact {{merchantName}}.", {"merchantName": "Acme"}) == (
            "Contact Acme."
        )

    def test_every_occurrence_replaced(self):
        assert render_template("{{x}} and {{x}}", {"x": "y"}) == "y and y"

    def test_unknown_placeholder_left_verbatim(self):
        assert render_template("{{a}} {{b}}", {"a": "1"}) == "1 {{b}}"

    def test_extra_variables_ignored(self):
        assert render_template("Plain text.", {"unused": "value"}) == "Plain text."

    def test_values_converted_with_str(self):
        assert render_template("Retry in {{minutes}} minutes", {"minutes": 5}) == (
            "Retry in 5 minutes"
        )
        assert render_template("{{flag}}", {"flag": None}) == "None"

    def test_inserted_text_not_rescanned(self):
        result = render_template("{{a}}", {"a": "{{b}}", "b": "oops"})
        assert result == "{{b}}"

    def test_value_with_regex_escapes(self):
        assert render_template("{{a}}", {"a": r"\1 \g<0>"}) == r"\1 \g<0>"

    def test_case_sensitive_names(self):
        assert render_template("{{Name}}", {"name": "x"}) == "{{Name}}"

    def test_non_ascii(self):
        assert render_template("{{merchantName}} までご連絡ください。", {"merchantName": "株式会社"}) == (
            "株式会社 までご連絡ください。"
        )
