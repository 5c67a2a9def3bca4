"""
Documentation Artifact Generator

Builds the documentation documents from the public API and writes them as
JSON or YAML:
- decline-codes: complete decline code database with all translations
- types: public types and their fields
- functions: API reference (signatures read from the live functions)
- metadata: package metadata, dataset statistics and fingerprint

Every document passes through its pydantic schema before it is written.
"""
from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml
from jsonschema import Draft202012Validator
from pydantic import BaseModel, ValidationError

from .. import __description__, __license__, __repository__, __version__
from ..config import OUTPUT_FORMATS
from ..exceptions import DocsExportError
from ..messages import (
    format_decline_message,
    get_all_decline_codes,
    get_decline_category,
    get_decline_description,
    get_decline_message,
    get_doc_version,
    get_message_from_stripe_error,
    is_hard_decline,
    is_soft_decline,
    is_valid_decline_code,
)
from ..models import (
    SUPPORTED_LOCALES,
    DeclineCategory,
    DeclineDescription,
    DeclineRecord,
    Locale,
    StripeError,
    Translation,
)
from ..registry import CODE_PATTERN, DeclineCodeRegistry, get_registry
from .schema import (
    CategorySummarySchema,
    DeclineCodeEntrySchema,
    DeclineCodesDocument,
    FunctionDefinitionSchema,
    FunctionParameterSchema,
    FunctionReturnSchema,
    FunctionsDocument,
    MetadataDocument,
    PackageInfoSchema,
    StatsSchema,
    TypeDefinitionSchema,
    TypePropertySchema,
    TypesDocument,
)

logger = logging.getLogger(__name__)

PACKAGE_NAME = "stripe-decline-codes"

ARTIFACT_NAMES = ("decline-codes", "types", "functions", "metadata")

ARTIFACT_MODELS: dict[str, type[BaseModel]] = {
    "decline-codes": DeclineCodesDocument,
    "types": TypesDocument,
    "functions": FunctionsDocument,
    "metadata": MetadataDocument,
}

SCHEMAS_DIR = "schemas"

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

PUBLIC_FUNCTIONS: tuple[Callable[..., Any], ...] = (
    get_decline_description,
    get_decline_message,
    get_all_decline_codes,
    is_valid_decline_code,
    get_doc_version,
    format_decline_message,
    get_decline_category,
    is_hard_decline,
    is_soft_decline,
    get_message_from_stripe_error,
)

CATEGORY_DESCRIPTIONS = {
    DeclineCategory.SOFT_DECLINE: "Temporary declines that may succeed if retried",
    DeclineCategory.HARD_DECLINE: "Permanent declines that should not be retried",
}

_PARAMETER_DESCRIPTIONS = {
    "code": "The Stripe decline code",
    "locale": "The locale to use (default: 'en')",
    "variables": "Values for {{name}} placeholders in the message",
    "error": "Stripe error object, error mapping, or response body",
    "registry": "Registry to read from (default: the built-in dataset)",
}

_EXAMPLES = {
    "get_decline_description": (
        "result = get_decline_description('insufficient_funds')\n"
        "print(result.record.description)\n"
        "# => 'The card has insufficient funds to complete the purchase.'"
    ),
    "get_decline_message": (
        "get_decline_message('insufficient_funds', 'ja')\n"
        "# => '別のお支払い方法を使用してもう一度お試しください。'"
    ),
    "get_all_decline_codes": "codes = get_all_decline_codes()",
    "is_valid_decline_code": (
        "is_valid_decline_code('insufficient_funds')  # => True\n"
        "is_valid_decline_code('invalid_code')  # => False"
    ),
    "get_doc_version": "get_doc_version()  # => '2024-12-18'",
    "format_decline_message": (
        "format_decline_message('insufficient_funds', 'en', {'merchantName': 'Acme Store'})"
    ),
    "get_decline_category": (
        "get_decline_category('insufficient_funds')  # => DeclineCategory.SOFT_DECLINE\n"
        "get_decline_category('fraudulent')  # => DeclineCategory.HARD_DECLINE"
    ),
    "is_hard_decline": (
        "is_hard_decline('fraudulent')  # => True\n"
        "is_hard_decline('insufficient_funds')  # => False"
    ),
    "is_soft_decline": (
        "is_soft_decline('insufficient_funds')  # => True\n"
        "is_soft_decline('fraudulent')  # => False"
    ),
    "get_message_from_stripe_error": (
        "error = {\n"
        "    'type': 'card_error',\n"
        "    'decline_code': 'insufficient_funds',\n"
        "    'message': 'Your card has insufficient funds.',\n"
        "}\n"
        "get_message_from_stripe_error(error, 'ja')\n"
        "# => '別のお支払い方法を使用してもう一度お試しください。'"
    ),
}

_FIELD_DESCRIPTIONS: dict[str, dict[str, str]] = {
    "Translation": {
        "description": "Translated description",
        "next_user_action": "Translated user action message",
    },
    "DeclineRecord": {
        "code": "The decline code",
        "category": "Category of the decline (soft or hard)",
        "description": "Technical description of why the payment was declined",
        "next_steps": "Recommended next steps for merchants",
        "next_user_action": "User-facing message that can be shown to customers",
        "translations": "Translations keyed by locale",
    },
    "DeclineDescription": {
        "doc_version": "Stripe API documentation version",
        "record": "Decline code information, or None if the code was not found",
    },
    "StripeError": {
        "type": "Error type",
        "decline_code": "The decline code from Stripe",
        "message": "Error message from Stripe",
        "code": "Stripe error code (e.g. card_declined)",
    },
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Introspection Helpers
# =============================================================================

def _annotation(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "Any"
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__name__", repr(annotation))


def _default(value: Any) -> str:
    if isinstance(value, Enum):
        return repr(value.value)
    return repr(value)


def format_signature(func: Callable[..., Any]) -> str:
    """
    Render a function signature without quoted annotations.

    Example:
        >>> format_signature(is_hard_decline)
        'is_hard_decline(code: Any, *, registry: Optional[DeclineCodeRegistry] = None) -> bool'
    """
    sig = inspect.signature(func)
    parts: list[str] = []
    keyword_only_marked = False
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.KEYWORD_ONLY and not keyword_only_marked:
            parts.append("*")
            keyword_only_marked = True
        text = f"{param.name}: {_annotation(param.annotation)}"
        if param.default is not inspect.Parameter.empty:
            text += f" = {_default(param.default)}"
        parts.append(text)
    return f"{func.__name__}({', '.join(parts)}) -> {_annotation(sig.return_annotation)}"


def describe_function(func: Callable[..., Any]) -> FunctionDefinitionSchema:
    """Build the reference entry for one public function."""
    sig = inspect.signature(func)
    doc = inspect.getdoc(func) or ""
    summary = doc.splitlines()[0] if doc else func.__name__

    parameters = [
        FunctionParameterSchema(
            name=param.name,
            type=_annotation(param.annotation),
            optional=param.default is not inspect.Parameter.empty,
            description=_PARAMETER_DESCRIPTIONS.get(param.name, ""),
        )
        for param in sig.parameters.values()
    ]
    return FunctionDefinitionSchema(
        name=func.__name__,
        description=summary,
        signature=format_signature(func),
        parameters=parameters,
        returns=FunctionReturnSchema(type=_annotation(sig.return_annotation)),
        example=_EXAMPLES.get(func.__name__),
    )


def describe_dataclass(cls: type, description: str) -> TypeDefinitionSchema:
    """Build the types entry for a dataclass from its fields."""
    descriptions = _FIELD_DESCRIPTIONS.get(cls.__name__, {})
    properties = []
    for f in dataclasses.fields(cls):
        has_default = (
            f.default is not dataclasses.MISSING
            or f.default_factory is not dataclasses.MISSING
        )
        properties.append(TypePropertySchema(
            name=f.name,
            type=_annotation(f.type),
            description=descriptions.get(f.name, ""),
            optional=True if has_default else None,
        ))
    return TypeDefinitionSchema(
        name=cls.__name__,
        kind="dataclass",
        description=description,
        properties=properties,
    )


# =============================================================================
# Document Builders
# =============================================================================

def build_decline_codes_document(
    registry: DeclineCodeRegistry,
    generated_at: datetime,
) -> DeclineCodesDocument:
    """Build the decline code database document."""
    categories = {
        category.value: CategorySummarySchema(
            description=CATEGORY_DESCRIPTIONS[category],
            codes=list(registry.codes_by_category(category)),
        )
        for category in DeclineCategory
    }
    codes = [
        DeclineCodeEntrySchema.model_validate(registry.lookup(code).to_dict())
        for code in registry.all_codes()
    ]
    return DeclineCodesDocument(
        version=registry.doc_version,
        generated_at=generated_at,
        total_codes=len(registry),
        categories=categories,
        codes=codes,
    )


def build_types_document(
    registry: DeclineCodeRegistry,
    generated_at: datetime,
) -> TypesDocument:
    """Build the public types document."""
    types = [
        TypeDefinitionSchema(
            name="Locale",
            kind="enum",
            description="Supported locale codes for decline code translations",
            definition=" | ".join(repr(locale.value) for locale in Locale),
            values=[locale.value for locale in Locale],
        ),
        TypeDefinitionSchema(
            name="DeclineCategory",
            kind="enum",
            description="Decline code categories: soft (retry may succeed) or hard (do not retry)",
            definition=" | ".join(repr(category.value) for category in DeclineCategory),
            values=[category.value for category in DeclineCategory],
        ),
        TypeDefinitionSchema(
            name="DeclineCode",
            kind="type-alias",
            description="All supported Stripe decline codes",
            definition=f"str matching {CODE_PATTERN.pattern}, checked by is_valid_decline_code()",
            values=list(registry.all_codes()),
        ),
        describe_dataclass(Translation, "Translation for a specific locale"),
        describe_dataclass(
            DeclineRecord,
            "Decline code information including descriptions and recommended actions",
        ),
        describe_dataclass(
            DeclineDescription,
            "Result containing decline code information and metadata",
        ),
        describe_dataclass(StripeError, "Stripe error object with decline code information"),
    ]
    return TypesDocument(
        version=registry.doc_version,
        generated_at=generated_at,
        types=types,
    )


def build_functions_document(
    registry: DeclineCodeRegistry,
    generated_at: datetime,
) -> FunctionsDocument:
    """Build the function reference document."""
    return FunctionsDocument(
        version=registry.doc_version,
        generated_at=generated_at,
        functions=[describe_function(func) for func in PUBLIC_FUNCTIONS],
    )


def build_metadata_document(
    registry: DeclineCodeRegistry,
    generated_at: datetime,
    functions: FunctionsDocument,
    types: TypesDocument,
) -> MetadataDocument:
    """Build the package metadata document."""
    soft = registry.codes_by_category(DeclineCategory.SOFT_DECLINE)
    hard = registry.codes_by_category(DeclineCategory.HARD_DECLINE)
    return MetadataDocument(
        package=PackageInfoSchema(
            name=PACKAGE_NAME,
            version=__version__,
            description=__description__,
            repository=__repository__,
            license=__license__,
        ),
        stripe_doc_version=registry.doc_version,
        generated_at=generated_at,
        supported_locales=list(SUPPORTED_LOCALES),
        dataset_hash=registry.content_hash(),
        stats=StatsSchema(
            total_decline_codes=len(registry),
            soft_decline_codes=len(soft),
            hard_decline_codes=len(hard),
            total_functions=len(functions.functions),
            total_types=len(types.types),
        ),
    )


def build_documents(
    registry: Optional[DeclineCodeRegistry] = None,
    generated_at: Optional[datetime] = None,
) -> dict[str, BaseModel]:
    """
    Build every documentation document.

    Args:
        registry: Registry to document (default: the built-in dataset)
        generated_at: Timestamp stamped on each document (default: now, UTC)

    Returns:
        Dict mapping artifact name to its validated document

    Raises:
        DocsExportError: If a document fails schema validation
    """
    registry = registry if registry is not None else get_registry()
    generated_at = generated_at or _now()

    try:
        decline_codes = build_decline_codes_document(registry, generated_at)
        types = build_types_document(registry, generated_at)
        functions = build_functions_document(registry, generated_at)
        metadata = build_metadata_document(registry, generated_at, functions, types)
    except ValidationError as e:
        raise DocsExportError(
            "documentation failed schema validation",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e

    return {
        "decline-codes": decline_codes,
        "types": types,
        "functions": functions,
        "metadata": metadata,
    }


# =============================================================================
# Writers
# =============================================================================

def serialize_document(document: BaseModel, output_format: str = "json") -> str:
    """
    Render a document as JSON (2-space indent) or YAML.

    Raises:
        DocsExportError: If the format is not supported
    """
    data = document.model_dump(mode="json", by_alias=True, exclude_none=True)
    if output_format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    raise DocsExportError(
        f"unsupported output format: {output_format!r}",
        details={"supported": list(OUTPUT_FORMATS)},
    )


def write_documents(
    documents: dict[str, BaseModel],
    output_dir: Union[str, Path],
    output_format: str = "json",
) -> list[Path]:
    """
    Write documents to ``output_dir`` as ``<artifact>.<format>``.

    Returns:
        Paths written, in artifact order

    Raises:
        DocsExportError: If the format is unsupported or a file can't be written
    """
    if output_format not in OUTPUT_FORMATS:
        raise DocsExportError(
            f"unsupported output format: {output_format!r}",
            details={"supported": list(OUTPUT_FORMATS)},
        )

    directory = Path(output_dir)
    written: list[Path] = []
    try:
        directory.mkdir(parents=True, exist_ok=True)
        for name, document in documents.items():
            path = directory / f"{name}.{output_format}"
            path.write_text(serialize_document(document, output_format), encoding="utf-8")
            logger.info(
                "Generated %s",
                path.name,
                extra={"artifact": name, "path": str(path), "output_format": output_format},
            )
            written.append(path)
    except OSError as e:
        raise DocsExportError(
            f"could not write documentation to {directory}: {e}",
            details={"output_dir": str(directory)},
        ) from e

    return written


# =============================================================================
# JSON Schemas
# =============================================================================

def build_json_schemas() -> dict[str, dict[str, Any]]:
    """
    Build a JSON Schema for each artifact from its pydantic model.

    Returns:
        Dict mapping artifact name to its schema
    """
    schemas: dict[str, dict[str, Any]] = {}
    for name, model in ARTIFACT_MODELS.items():
        schema = {"$schema": JSON_SCHEMA_DIALECT}
        schema.update(model.model_json_schema(by_alias=True))
        schemas[name] = schema
    return schemas


def write_json_schemas(output_dir: Union[str, Path]) -> list[Path]:
    """
    Write ``<output_dir>/schemas/<artifact>.schema.json`` for every artifact.

    The paths match the ``$schema`` reference each artifact carries.

    Raises:
        DocsExportError: If a file can't be written
    """
    directory = Path(output_dir) / SCHEMAS_DIR
    written: list[Path] = []
    try:
        directory.mkdir(parents=True, exist_ok=True)
        for name, schema in build_json_schemas().items():
            path = directory / f"{name}.schema.json"
            path.write_text(
                json.dumps(schema, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
            logger.info("Generated %s", path.name, extra={"artifact": name, "path": str(path)})
            written.append(path)
    except OSError as e:
        raise DocsExportError(
            f"could not write schemas to {directory}: {e}",
            details={"output_dir": str(directory)},
        ) from e

    return written


def validate_artifact(name: str, data: Any) -> list[str]:
    """
    Validate loaded artifact data against its JSON Schema.

    Returns:
        List of error messages (empty when valid, at most 10)
    """
    if name not in ARTIFACT_MODELS:
        return [f"unknown artifact: {name}"]

    validator = Draft202012Validator(build_json_schemas()[name])
    messages = []
    for error in list(validator.iter_errors(data))[:10]:
        path = " -> ".join(str(p) for p in error.absolute_path)
        messages.append(f"{path}: {error.message}" if path else error.message)
    return messages


def validate_output_dir(
    output_dir: Union[str, Path],
    output_format: str = "json",
) -> dict[str, list[str]]:
    """
    Load every written artifact from ``output_dir`` and validate it.

    Returns:
        Dict mapping artifact name to its errors (empty lists when valid)

    Raises:
        DocsExportError: If the format is unsupported or a file can't be read
    """
    if output_format not in OUTPUT_FORMATS:
        raise DocsExportError(
            f"unsupported output format: {output_format!r}",
            details={"supported": list(OUTPUT_FORMATS)},
        )

    results: dict[str, list[str]] = {}
    for name in ARTIFACT_NAMES:
        path = Path(output_dir) / f"{name}.{output_format}"
        try:
            text = path.read_text(encoding="utf-8")
            data = json.loads(text) if output_format == "json" else yaml.safe_load(text)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise DocsExportError(
                f"could not load {path}: {e}",
                details={"path": str(path)},
            ) from e
        results[name] = validate_artifact(name, data)
        logger.debug("Validated %s", path.name, extra={"artifact": name, "path": str(path)})
    return results


# =============================================================================
# Verification
# =============================================================================

def verify_registry(registry: Optional[DeclineCodeRegistry] = None) -> list[str]:
    """
    Cross-check a registry through the public accessors.

    Returns:
        List of problems (empty when the registry is consistent)
    """
    registry = registry if registry is not None else get_registry()
    errors: list[str] = []

    codes = registry.all_codes()
    if len(set(codes)) != len(codes):
        errors.append("duplicate codes in all_codes()")

    for code in codes:
        if not CODE_PATTERN.fullmatch(code):
            errors.append(f"{code}: key is not a lowercase underscore token")
        hard = registry.is_hard_decline(code)
        soft = registry.is_soft_decline(code)
        if hard == soft:
            errors.append(f"{code}: must be exactly one of hard/soft")
        description = get_decline_description(code, registry=registry)
        if description.record is None:
            errors.append(f"{code}: listed but lookup failed")
            continue
        for locale in SUPPORTED_LOCALES:
            message = format_decline_message(code, locale, registry=registry)
            if message != get_decline_message(code, locale, registry=registry):
                errors.append(f"{code}: formatting without variables changed the {locale} message")

    soft_count = len(registry.codes_by_category(DeclineCategory.SOFT_DECLINE))
    hard_count = len(registry.codes_by_category(DeclineCategory.HARD_DECLINE))
    if soft_count + hard_count != len(codes):
        errors.append(
            f"category counts ({soft_count} soft + {hard_count} hard) "
            f"do not add up to {len(codes)} codes"
        )

    return errors


__all__ = [
    "PACKAGE_NAME",
    "ARTIFACT_NAMES",
    "ARTIFACT_MODELS",
    "SCHEMAS_DIR",
    "PUBLIC_FUNCTIONS",
    "CATEGORY_DESCRIPTIONS",
    "format_signature",
    "describe_function",
    "describe_dataclass",
    "build_decline_codes_document",
    "build_types_document",
    "build_functions_document",
    "build_metadata_document",
    "build_documents",
    "serialize_document",
    "write_documents",
    "build_json_schemas",
    "write_json_schemas",
    "validate_artifact",
    "validate_output_dir",
    "verify_registry",
]
