"""
Pytest configuration and fixtures for stripe_decline_codes tests.

Provides record factories, a small custom registry with partial
translations and placeholders, and deterministic fuzz inputs.
"""
import random
import string

import pytest

from stripe_decline_codes import (
    DeclineCategory,
    DeclineCodeRegistry,
    DeclineRecord,
    Translation,
    get_registry,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_record(
    code: str = "sample_code",
    category=DeclineCategory.SOFT_DECLINE,
    description: str = "Sample description.",
    next_steps: str = "Sample next steps.",
    next_user_action: str = "Sample user action.",
    translations=None,
) -> DeclineRecord:
    """Create a DeclineRecord with required fields."""
    return DeclineRecord(
        code=code,
        category=category,
        description=description,
        next_steps=next_steps,
        next_user_action=next_user_action,
        translations=translations or {},
    )


def random_strings(count: int = 200, seed: int = 20241218, max_length: int = 64) -> list[str]:
    """Seeded pseudo-random strings mixing ASCII, whitespace, and non-ASCII."""
    rng = random.Random(seed)
    alphabet = string.ascii_letters + string.digits + "_- \t\n" + "カード拒否éß€{}"
    values = []
    for _ in range(count):
        length = rng.randint(0, max_length)
        values.append("".join(rng.choice(alphabet) for _ in range(length)))
    return values


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def registry():
    """The built-in registry."""
    return get_registry()


@pytest.fixture
def all_codes(registry):
    return list(registry.all_codes())


@pytest.fixture
def custom_registry():
    """
    Registry with:
    - a code translated to Japanese
    - a code with no translations
    - a code whose messages contain {{placeholders}}
    """
    return DeclineCodeRegistry.from_records(
        [
            make_record(
                code="translated_code",
                category=DeclineCategory.HARD_DECLINE,
                next_user_action="English message.",
                translations={
                    "ja": Translation(
                        description="日本語の説明。",
                        next_user_action="日本語のメッセージ。",
                    ),
                },
            ),
            make_record(
                code="english_only",
                next_user_action="Only English.",
            ),
            make_record(
                code="templated_code",
                next_user_action="Contact {{merchantName}} at {{supportEmail}}.",
                translations={
                    "ja": Translation(
                        description="テンプレート。",
                        next_user_action="{{merchantName}} までご連絡ください。",
                    ),
                },
            ),
        ],
        doc_version="2025-01-15",
    )


@pytest.fixture
def fuzz_strings(all_codes):
    """Random strings that are not decline codes."""
    valid = set(all_codes)
    return [s for s in random_strings() if s not in valid]
