"""Coercion of caller input into a parsed document."""

from collections.abc import Mapping
from typing import Any, Union

from sbomvalidator._internal.json_value import parse_json
from sbomvalidator.errors import MalformedJSONError

DocumentInput = Union[bytes, bytearray, str, Mapping]


def load_document(document: DocumentInput) -> Any:
    """Return the parsed value tree for raw JSON text, or a mapping as-is."""
    if isinstance(document, Mapping):
        return document
    try:
        return parse_json(document)
    except (ValueError, TypeError) as e:
        raise MalformedJSONError(f"invalid JSON format: {e}") from e
