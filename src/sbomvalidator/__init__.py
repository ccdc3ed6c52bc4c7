"""sbomvalidator: schema validation for JSON SBOMs (CycloneDX, SPDX)."""

import logging
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("sbom-validator")
except PackageNotFoundError:
    __version__ = "dev"

# Silent unless the host application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API exports
# Note: module names (api, cli) are not re-exported to avoid shadowing
from sbomvalidator.api import (
    SBOMValidator,
    available_versions,
    detect_format,
    extract_version,
    resolve_schema,
    validate,
    validate_against_schema,
    validate_file,
)
from sbomvalidator.codes import Dialect, ErrorCode
from sbomvalidator.contracts import SchemaDocument, ValidationResult
from sbomvalidator.errors import (
    InvalidSchemaError,
    MalformedJSONError,
    MissingVersionError,
    SBOMError,
    SchemaNotFoundError,
    UnknownFormatError,
    UnsupportedDialectError,
    UnsupportedFileFormatError,
)
from sbomvalidator.kernel.corpus import (
    DirectorySchemaCorpus,
    InMemorySchemaCorpus,
    PackagedSchemaCorpus,
    SchemaCorpus,
)
from sbomvalidator.kernel.resolver import SchemaResolver

__all__ = [
    "__version__",
    "validate",
    "validate_file",
    "detect_format",
    "extract_version",
    "resolve_schema",
    "validate_against_schema",
    "available_versions",
    "SBOMValidator",
    "SchemaResolver",
    "SchemaCorpus",
    "PackagedSchemaCorpus",
    "DirectorySchemaCorpus",
    "InMemorySchemaCorpus",
    "Dialect",
    "ErrorCode",
    "SchemaDocument",
    "ValidationResult",
    "SBOMError",
    "MalformedJSONError",
    "UnsupportedFileFormatError",
    "UnknownFormatError",
    "MissingVersionError",
    "UnsupportedDialectError",
    "SchemaNotFoundError",
    "InvalidSchemaError",
]
