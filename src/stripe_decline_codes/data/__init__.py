"""
Stripe Decline Codes: Embedded Data

The dataset ships as Python data and is never loaded from files at runtime.
"""
from __future__ import annotations

from .decline_codes import DOC_VERSION, create_stripe_decline_codes

__all__ = [
    "DOC_VERSION",
    "create_stripe_decline_codes",
]
