"""Enumerated constants for sbomvalidator.

These constants prevent stringly-typed dialect names and error codes
and ensure client code matches on the values the pipeline produces.
"""

from enum import Enum


class Dialect(str, Enum):
    """SBOM format families the pipeline can classify."""

    CYCLONEDX = "CycloneDX"
    SPDX = "SPDX"

    @property
    def namespace(self) -> str:
        """Corpus namespace holding this dialect's schemas."""
        return _NAMESPACES[self]

    def schema_name(self, version: str) -> str:
        """File name of the schema for `version` within the namespace."""
        return _NAME_TEMPLATES[self].format(version=version)


_NAMESPACES = {
    Dialect.CYCLONEDX: "cyclonedx",
    Dialect.SPDX: "spdx",
}

_NAME_TEMPLATES = {
    Dialect.CYCLONEDX: "bom-{version}.schema.json",
    Dialect.SPDX: "spdx-{version}.schema.json",
}


class ErrorCode(str, Enum):
    """Codes for failures that prevent a validity verdict."""

    # Input
    MALFORMED_JSON = "MALFORMED_JSON"
    UNSUPPORTED_FILE_FORMAT = "UNSUPPORTED_FILE_FORMAT"

    # Classification
    UNKNOWN_FORMAT = "UNKNOWN_FORMAT"
    MISSING_VERSION = "MISSING_VERSION"

    # Schema resolution
    UNSUPPORTED_DIALECT = "UNSUPPORTED_DIALECT"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    INVALID_SCHEMA = "INVALID_SCHEMA"
