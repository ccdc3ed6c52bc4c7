"""Exception types raised by the validation pipeline.

Every class maps to one ErrorCode. A document that merely fails its schema
is not an error: it comes back as a ValidationResult with violations.
"""

from typing import Any, Dict, List, Optional

from sbomvalidator.codes import ErrorCode


class SBOMError(ValueError):
    """Base class for failures that prevent a validity verdict."""

    code: ErrorCode

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details


class MalformedJSONError(SBOMError):
    """Input bytes are not syntactically valid JSON."""
    code = ErrorCode.MALFORMED_JSON


class UnsupportedFileFormatError(MalformedJSONError):
    """Raised by validate() when the input is not a JSON document at all."""
    code = ErrorCode.UNSUPPORTED_FILE_FORMAT


class UnknownFormatError(SBOMError):
    """No recognized dialect marker was found."""
    code = ErrorCode.UNKNOWN_FORMAT


class MissingVersionError(SBOMError):
    """Dialect recognized but its version field is absent, wrong-typed or malformed."""
    code = ErrorCode.MISSING_VERSION


class UnsupportedDialectError(SBOMError):
    """The schema corpus has no namespace for the dialect."""
    code = ErrorCode.UNSUPPORTED_DIALECT


class SchemaNotFoundError(SBOMError):
    """The dialect is supported but no schema matches the version."""
    code = ErrorCode.SCHEMA_NOT_FOUND

    def __init__(self, message: str, key: str, available: Optional[List[str]] = None):
        super().__init__(message, key=key, available=list(available or []))
        self.key = key
        self.available = list(available or [])


class InvalidSchemaError(SBOMError):
    """The resolved schema document is itself malformed."""
    code = ErrorCode.INVALID_SCHEMA
