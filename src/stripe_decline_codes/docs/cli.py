"""
Stripe Decline Codes: CLI Module

Command-line interface for exporting documentation and inspecting the dataset.

Usage:
    stripe-decline-codes generate --output-dir docs-data --format json
    stripe-decline-codes validate --output-dir docs-data --format json
    stripe-decline-codes stats
    stripe-decline-codes show insufficient_funds --locale ja
    stripe-decline-codes verify

Also runnable as ``python -m stripe_decline_codes.docs.cli``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import config
from ..canon import content_hash_short
from ..exceptions import DeclineCodesError
from ..log import configure_logging
from ..messages import get_decline_description, get_decline_message
from ..models import DeclineCategory, Locale
from ..registry import get_registry
from .generator import (
    SCHEMAS_DIR,
    build_documents,
    validate_output_dir,
    verify_registry,
    write_documents,
    write_json_schemas,
)

logger = logging.getLogger(__name__)


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate documentation artifacts and their JSON Schemas."""
    documents = build_documents()
    paths = write_documents(documents, args.output_dir, args.format)
    schema_paths = write_json_schemas(args.output_dir)

    for path in paths:
        print(f"Generated {path.name}")
    for path in schema_paths:
        print(f"Generated {SCHEMAS_DIR}/{path.name}")
    print()
    print(f"All documentation files generated in {args.output_dir}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate generated artifacts against their JSON Schemas."""
    results = validate_output_dir(args.output_dir, args.format)

    failed = 0
    for name, errors in results.items():
        if errors:
            failed += 1
            print(f"[FAIL] {name}.{args.format}")
            for error in errors:
                print(f"    {error}")
        else:
            print(f"[OK]   {name}.{args.format}")

    print()
    print(f"{len(results) - failed}/{len(results)} artifacts valid")
    return 1 if failed else 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print a per-category summary of the dataset."""
    registry = get_registry()

    print("DECLINE CODE SUMMARY")
    print("=" * 60)
    print(f"  Doc version:  {registry.doc_version}")
    print(f"  Dataset hash: {content_hash_short(registry.to_dict())}")
    print()
    print(f"{'Category':<20} {'Codes':>8} {'Share':>8}")
    print("-" * 60)

    total = len(registry)
    for category in DeclineCategory:
        count = len(registry.codes_by_category(category))
        share = count / total * 100 if total else 0.0
        print(f"{category.value:<20} {count:>8} {share:>7.1f}%")

    print("-" * 60)
    print(f"{'TOTAL':<20} {total:>8}")
    print()

    missing = {
        locale.value: [
            code for code in registry.all_codes()
            if registry.lookup(code).translation_for(locale) is None
        ]
        for locale in Locale
        if locale is not Locale.EN
    }
    print("TRANSLATION COVERAGE")
    print("-" * 60)
    for locale, codes in missing.items():
        covered = total - len(codes)
        print(f"  {locale}: {covered}/{total}")
    print()
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print one decline code."""
    result = get_decline_description(args.code)
    record = result.record
    if record is None:
        print(f"Unknown decline code: {args.code}")
        return 1

    translation = record.translation_for(args.locale)
    description = translation.description if translation else record.description

    print(record.code)
    print("-" * 60)
    print(f"  Category:     {record.category.value}")
    print(f"  Description:  {description}")
    print(f"  Next steps:   {record.next_steps}")
    print(f"  Message:      {get_decline_message(record.code, args.locale)}")
    print(f"  Doc version:  {result.doc_version}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify dataset consistency."""
    registry = get_registry()
    errors = verify_registry(registry)

    if errors:
        print("VERIFICATION FAILED")
        print("-" * 40)
        for error in errors:
            print(f"  - {error}")
        return 1

    print("VERIFICATION PASSED")
    print("-" * 40)
    print(f"  Decline codes: {len(registry)}")
    print(f"  Doc version: {registry.doc_version}")
    return 0


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output-dir",
        default=config.SDC_DOCS_DIR,
        help="Output directory (default: $SDC_DOCS_DIR or docs-data)",
    )
    parser.add_argument(
        "--format",
        choices=config.OUTPUT_FORMATS,
        default=config.SDC_DOCS_FORMAT,
        help="Output format (default: $SDC_DOCS_FORMAT or json)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Stripe Decline Codes documentation CLI",
        prog="stripe-decline-codes",
    )
    parser.add_argument(
        "--log-level",
        default=config.SDC_LOG_LEVEL,
        help="Logging level (default: $SDC_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=config.SDC_LOG_JSON,
        help="Emit structured JSON logs",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    gen_parser = subparsers.add_parser("generate", help="Generate documentation artifacts")
    _add_output_arguments(gen_parser)
    gen_parser.set_defaults(func=cmd_generate)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate generated artifacts against their JSON Schemas"
    )
    _add_output_arguments(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    stats_parser = subparsers.add_parser("stats", help="Show dataset statistics")
    stats_parser.set_defaults(func=cmd_stats)

    show_parser = subparsers.add_parser("show", help="Show one decline code")
    show_parser.add_argument("code", help="Decline code, e.g. insufficient_funds")
    show_parser.add_argument(
        "--locale",
        choices=[locale.value for locale in Locale],
        default=Locale.EN.value,
        help="Locale for the description and message",
    )
    show_parser.set_defaults(func=cmd_show)

    verify_parser = subparsers.add_parser("verify", help="Verify dataset consistency")
    verify_parser.set_defaults(func=cmd_verify)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level, args.json_logs)

    try:
        return args.func(args)
    except DeclineCodesError as e:
        logger.error(str(e), extra={"error_code": e.code})
        return 1


if __name__ == "__main__":
    sys.exit(main())
