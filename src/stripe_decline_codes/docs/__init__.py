"""
Stripe Decline Codes: Documentation Export

Offline tooling that renders the public API and dataset into documentation
artifacts (decline-codes, types, functions, metadata) as JSON or YAML.

Usage:
    from stripe_decline_codes.docs import build_documents, write_documents

    documents = build_documents()
    write_documents(documents, "docs-data", "yaml")
"""
from __future__ import annotations

from .generator import (
    ARTIFACT_NAMES,
    PUBLIC_FUNCTIONS,
    build_documents,
    build_json_schemas,
    serialize_document,
    validate_artifact,
    validate_output_dir,
    verify_registry,
    write_documents,
    write_json_schemas,
)
from .schema import (
    SCHEMA_VERSION,
    DeclineCodesDocument,
    FunctionsDocument,
    MetadataDocument,
    TypesDocument,
)

__all__ = [
    # Generator
    "ARTIFACT_NAMES",
    "PUBLIC_FUNCTIONS",
    "build_documents",
    "serialize_document",
    "write_documents",
    "build_json_schemas",
    "write_json_schemas",
    "validate_artifact",
    "validate_output_dir",
    "verify_registry",
    # Schemas
    "SCHEMA_VERSION",
    "DeclineCodesDocument",
    "TypesDocument",
    "FunctionsDocument",
    "MetadataDocument",
]
