"""
Stripe Decline Codes Configuration

Settings for the documentation tooling, read from the environment.
The library functions take no configuration.
"""
from __future__ import annotations

import os

SDC_LOG_LEVEL = os.getenv("SDC_LOG_LEVEL", "INFO")
SDC_LOG_JSON = os.getenv("SDC_LOG_JSON", "false").lower() == "true"
SDC_DOCS_DIR = os.getenv("SDC_DOCS_DIR", "docs-data")
SDC_DOCS_FORMAT = os.getenv("SDC_DOCS_FORMAT", "json").lower()

OUTPUT_FORMATS = ("json", "yaml")

__all__ = [
    "SDC_LOG_LEVEL",
    "SDC_LOG_JSON",
    "SDC_DOCS_DIR",
    "SDC_DOCS_FORMAT",
    "OUTPUT_FORMATS",
]
