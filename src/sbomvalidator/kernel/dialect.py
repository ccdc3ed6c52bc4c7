"""Format classifier: decides which SBOM dialect a document follows.

Markers are checked in a fixed priority order:

1. a string ``bomFormat`` field means CycloneDX,
2. otherwise a string ``spdxVersion`` field means SPDX,
3. otherwise the document is of unknown format.

A marker holding a non-string value counts as absent. A document carrying
both markers is CycloneDX.
"""

from sbomvalidator._internal.json_value import has_string
from sbomvalidator._internal.logging_config import get_logger
from sbomvalidator.codes import Dialect
from sbomvalidator.errors import UnknownFormatError
from .document import DocumentInput, load_document

logger = get_logger(__name__)

CYCLONEDX_FORMAT_FIELD = "bomFormat"
SPDX_VERSION_FIELD = "spdxVersion"

# Priority order; first match wins.
DIALECT_MARKERS = (
    (CYCLONEDX_FORMAT_FIELD, Dialect.CYCLONEDX),
    (SPDX_VERSION_FIELD, Dialect.SPDX),
)


def detect_format(document: DocumentInput) -> Dialect:
    """Classify a document as one of the known SBOM dialects.

    Args:
        document: Raw JSON text (bytes or str) or an already-parsed mapping.

    Returns:
        The detected Dialect.

    Raises:
        MalformedJSONError: If raw input does not parse.
        UnknownFormatError: If no string-typed dialect marker is present.
    """
    obj = load_document(document)

    for field, dialect in DIALECT_MARKERS:
        if has_string(obj, field):
            logger.debug("sbom_dialect_detected", dialect=dialect.value, marker=field)
            return dialect

    raise UnknownFormatError(
        "unknown SBOM type or missing required fields "
        f'(expected a string "{CYCLONEDX_FORMAT_FIELD}" or "{SPDX_VERSION_FIELD}")'
    )
