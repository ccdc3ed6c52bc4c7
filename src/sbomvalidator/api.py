"""Public API for sbomvalidator.

High-level functions that run the detection-and-validation pipeline:

    raw bytes -> detect_format -> extract_version -> resolve_schema
              -> validate_against_schema -> ValidationResult

Any stage failure raises a typed SBOMError and later stages never run.
Schema non-conformance is not an error; it is a ValidationResult with
valid=False and the full list of violations.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from sbomvalidator._internal.json_value import parse_json
from sbomvalidator._internal.logging_config import get_logger
from sbomvalidator.codes import Dialect
from sbomvalidator.contracts import SchemaDocument, ValidationResult
from sbomvalidator.errors import UnsupportedFileFormatError
from sbomvalidator.kernel.corpus import SchemaCorpus
from sbomvalidator.kernel.dialect import detect_format
from sbomvalidator.kernel.resolver import SchemaResolver
from sbomvalidator.kernel.structural import validate_against_schema
from sbomvalidator.kernel.version import extract_version

logger = get_logger(__name__)


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class SBOMValidator:
    """Validation pipeline bound to one schema corpus.

    Holding on to an instance keeps its resolver, and with
    ``cache_schemas=True`` the resolved schemas, alive between calls.
    Instances are safe to share between threads.
    """

    def __init__(
        self,
        corpus: Optional[SchemaCorpus] = None,
        *,
        cache_schemas: bool = True,
        resolver: Optional[SchemaResolver] = None,
    ):
        self.resolver = resolver if resolver is not None else SchemaResolver(corpus, cache=cache_schemas)

    def validate(self, data: Union[bytes, bytearray, str]) -> ValidationResult:
        """Validate a JSON-serialized SBOM end to end.

        Raises:
            UnsupportedFileFormatError: If the input is not valid JSON.
            UnknownFormatError, MissingVersionError, UnsupportedDialectError,
            SchemaNotFoundError, InvalidSchemaError: From the pipeline stages.
        """
        try:
            document = parse_json(data)
        except (ValueError, TypeError) as e:
            raise UnsupportedFileFormatError(f"unsupported file format: input is not JSON ({e})") from e

        dialect = detect_format(document)
        version = extract_version(document, dialect)
        schema = self.resolver.resolve(version, dialect)
        return validate_against_schema(schema, data)

    def validate_file(self, path: Union[str, os.PathLike, Path]) -> ValidationResult:
        """Read an SBOM file and validate it.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        path = _normalize_path(path)
        logger.debug("sbom_file_read", path=str(path))
        return self.validate(path.read_bytes())

    def resolve_schema(self, version: str, dialect: Dialect) -> SchemaDocument:
        """Resolve the schema document for a dialect version."""
        return self.resolver.resolve(version, dialect)

    def available_versions(self, dialect: Dialect) -> List[str]:
        """Versions the corpus holds schemas for."""
        return self.resolver.available_versions(Dialect(dialect))


def _pipeline(resolver: Optional[SchemaResolver]) -> SBOMValidator:
    return SBOMValidator(cache_schemas=False, resolver=resolver)


def validate(
    data: Union[bytes, bytearray, str],
    *,
    resolver: Optional[SchemaResolver] = None,
) -> ValidationResult:
    """Validate a JSON-serialized SBOM against the schema of its declared version.

    This is the recommended entry point; it composes all pipeline stages.

    Args:
        data: SBOM content as JSON text.
        resolver: Schema resolver to use (defaults to an uncached resolver
            over the packaged corpus).

    Returns:
        ValidationResult; valid is True exactly when violations is empty.

    Example:
        >>> result = validate(open("bom.json", "rb").read())
        >>> if not result.valid:
        ...     print("\\n".join(result.violations))
    """
    return _pipeline(resolver).validate(data)


def validate_file(
    path: Union[str, os.PathLike, Path],
    *,
    resolver: Optional[SchemaResolver] = None,
) -> ValidationResult:
    """Read an SBOM from disk and validate it (see validate())."""
    return _pipeline(resolver).validate_file(path)


def resolve_schema(
    version: str,
    dialect: Dialect,
    *,
    resolver: Optional[SchemaResolver] = None,
) -> SchemaDocument:
    """Resolve the schema document for a dialect version.

    Raises:
        UnsupportedDialectError: If no schemas are bundled for the dialect.
        SchemaNotFoundError: If none matches the version; carries the lookup key.
    """
    return _pipeline(resolver).resolve_schema(version, dialect)


def available_versions(
    dialect: Dialect,
    *,
    resolver: Optional[SchemaResolver] = None,
) -> List[str]:
    """Versions of a dialect the corpus can validate, naturally sorted."""
    return _pipeline(resolver).available_versions(dialect)


__all__ = [
    "SBOMValidator",
    "available_versions",
    "detect_format",
    "extract_version",
    "resolve_schema",
    "validate",
    "validate_against_schema",
    "validate_file",
]
