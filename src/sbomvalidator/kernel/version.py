"""Version extractor: pulls the dialect-specific version identifier."""

from sbomvalidator._internal.json_value import FieldMissing, TypeMismatch, get_string
from sbomvalidator._internal.logging_config import get_logger
from sbomvalidator.codes import Dialect
from sbomvalidator.errors import MissingVersionError, UnknownFormatError
from .document import DocumentInput, load_document

logger = get_logger(__name__)

CYCLONEDX_VERSION_FIELD = "specVersion"
SPDX_VERSION_FIELD = "spdxVersion"


def split_spdx_version(spdx_version: str) -> str:
    """Return the version embedded in an SPDX marker such as "SPDX-2.3".

    Only the first hyphen separates prefix from version, so "SPDX-2.3-extra"
    yields "2.3-extra".

    Raises:
        MissingVersionError: If there is no hyphen or nothing follows it.
    """
    prefix, sep, version = spdx_version.partition("-")
    if not sep or not version:
        raise MissingVersionError(
            f"invalid SPDX version format: {spdx_version!r}",
            field=SPDX_VERSION_FIELD,
            value=spdx_version,
        )
    return version


def _read_version_field(obj, field: str) -> str:
    try:
        return get_string(obj, field)
    except (FieldMissing, TypeMismatch) as e:
        raise MissingVersionError(
            f'"{field}" field missing or not a string', field=field
        ) from e


def extract_version(document: DocumentInput, dialect: Dialect) -> str:
    """Extract the schema version identifier for a known dialect.

    CycloneDX stores it verbatim in ``specVersion``; SPDX embeds it after
    the first hyphen of ``spdxVersion``.

    Raises:
        MalformedJSONError: If raw input does not parse.
        UnknownFormatError: If `dialect` is not a known Dialect value.
        MissingVersionError: If the version field is absent, not a string,
            or (SPDX) lacks a non-empty suffix.
    """
    try:
        dialect = Dialect(dialect)
    except ValueError as e:
        raise UnknownFormatError(f"unknown SBOM format: {dialect!r}") from e

    obj = load_document(document)

    if dialect is Dialect.CYCLONEDX:
        version = _read_version_field(obj, CYCLONEDX_VERSION_FIELD)
    elif dialect is Dialect.SPDX:
        version = split_spdx_version(_read_version_field(obj, SPDX_VERSION_FIELD))
    else:
        raise UnknownFormatError(f"no version rule for dialect {dialect.value}")

    logger.debug("sbom_version_extracted", dialect=dialect.value, version=version)
    return version
