"""sbom-validator CLI: validate SBOM files from the command line."""

import argparse
import os
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

from sbomvalidator._internal.logging_config import setup_logging
from sbomvalidator._internal.report_contract import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_DISPLAYED_VIOLATIONS,
    LOG_LEVEL_ENV_VAR,
)
from sbomvalidator.api import SBOMValidator
from sbomvalidator.codes import Dialect
from sbomvalidator.contracts import ValidationResult
from sbomvalidator.errors import SBOMError
from sbomvalidator.kernel.corpus import DirectorySchemaCorpus

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def format_violations(violations: List[str], limit: int = DEFAULT_MAX_DISPLAYED_VIOLATIONS) -> List[str]:
    """Display lines for a violation list, truncated to `limit` (0 = all)."""
    shown = violations if limit <= 0 else violations[:limit]
    lines = [f"- {message}" for message in shown]
    remaining = len(violations) - len(shown)
    if remaining > 0:
        lines.append(f"...and {remaining} more errors.")
    return lines


def _print_result(result: ValidationResult, max_errors: int) -> None:
    if result.valid:
        print("SBOM is valid")
        return
    if max_errors > 0:
        print(f"Validation failed! Showing up to {max_errors} errors:")
    else:
        print(f"Validation failed with {len(result.violations)} errors:")
    for line in format_violations(result.violations, max_errors):
        print(line)


def _build_validator(schema_dir: Optional[Path]) -> SBOMValidator:
    if schema_dir is None:
        return SBOMValidator()
    if not schema_dir.is_dir():
        raise FileNotFoundError(f"schema directory not found: {schema_dir}")
    return SBOMValidator(DirectorySchemaCorpus(schema_dir))


def _cmd_validate(args) -> int:
    try:
        validator = _build_validator(args.schema_dir)
        result = validator.validate_file(args.file)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        print(f"Error: failed to read SBOM file: {e}", file=sys.stderr)
        return EXIT_ERROR
    except SBOMError as e:
        print(f"Error during validation [{e.code.value}]: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(result.model_dump_json(indent=2))
    elif not args.quiet or not result.valid:
        if not args.quiet:
            print(f"Detected SBOM Type: {result.dialect.value if result.dialect else 'unknown'}")
            print(f"Detected Schema Version: {result.version}")
        _print_result(result, args.max_errors)
    return EXIT_VALID if result.valid else EXIT_INVALID


def _cmd_schemas(args) -> int:
    try:
        validator = _build_validator(args.schema_dir)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    for dialect in Dialect:
        if validator.resolver.supports(dialect):
            versions = validator.available_versions(dialect)
            print(f"{dialect.value}: {', '.join(versions) or '(none)'}")
        else:
            print(f"{dialect.value}: not supported")
    return EXIT_VALID


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for sbom-validator commands."""
    try:
        package_version = get_version("sbom-validator")
    except PackageNotFoundError:
        package_version = "dev"

    parser = argparse.ArgumentParser(
        prog="sbom-validator",
        description="Validate CycloneDX/SPDX JSON SBOMs against their official schemas"
    )
    parser.add_argument("--version", action="version", version=f"sbom-validator {package_version}")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL),
        choices=["debug", "info", "warning", "error"],
        type=str.lower,
        help=f"Log verbosity on stderr (default from ${LOG_LEVEL_ENV_VAR}, else {DEFAULT_LOG_LEVEL})"
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines"
    )
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--schema-dir",
        type=Path,
        default=None,
        help="Directory of <namespace>/<schema>.json files to use instead of the bundled corpus"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate an SBOM JSON file",
        parents=[parent_parser]
    )
    validate_parser.add_argument(
        "file",
        type=Path,
        help="Path to the SBOM JSON file"
    )
    validate_parser.add_argument(
        "--max-errors",
        type=int,
        default=DEFAULT_MAX_DISPLAYED_VIOLATIONS,
        help=f"Violations to print before summarizing the rest (default {DEFAULT_MAX_DISPLAYED_VIOLATIONS}, 0 = all)"
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validation result as JSON"
    )
    validate_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print output when the SBOM is invalid"
    )

    subparsers.add_parser(
        "schemas",
        help="List the schema versions available for validation",
        parents=[parent_parser]
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level, json_format=args.log_json)

    if args.command == "validate":
        sys.exit(_cmd_validate(args))
    elif args.command == "schemas":
        sys.exit(_cmd_schemas(args))
    else:
        parser.print_help()
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
