"""JSON parsing and checked field access.

Parsed documents are plain dict/list/scalar trees. The accessors here keep
"field absent" and "field present with the wrong type" apart, which the
format classifier and the version extractor both depend on.
"""

import json
from collections.abc import Mapping
from typing import Any, Union

JsonInput = Union[bytes, bytearray, str]


class FieldMissing(LookupError):
    """The requested key is not present in the object."""

    def __init__(self, key: str):
        super().__init__(f'"{key}" field missing')
        self.key = key


class TypeMismatch(TypeError):
    """The requested key is present but holds a value of another JSON type."""

    def __init__(self, key: str, expected: str, actual: Any):
        super().__init__(f'"{key}" field is {json_type_name(actual)}, expected {expected}')
        self.key = key
        self.expected = expected
        self.actual = actual


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity by default; strict JSON does not.
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_json(data: JsonInput) -> Any:
    """Parse JSON text into a Python value tree.

    Bytes are decoded by the json module (UTF-8/16/32 detection).

    Raises:
        ValueError: If the input is not syntactically valid JSON (this
            includes empty input and undecodable bytes) or nests deeper than
            the interpreter's recursion limit.
    """
    if isinstance(data, bytearray):
        data = bytes(data)
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError("JSON nesting too deep to parse") from e


def is_json(data: JsonInput) -> bool:
    """Return True if `data` parses as JSON."""
    try:
        parse_json(data)
    except (ValueError, TypeError):
        return False
    return True


def json_type_name(value: Any) -> str:
    """JSON type name of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def get_string(obj: Any, key: str) -> str:
    """Return obj[key] as a string.

    Raises:
        FieldMissing: If obj is not an object or has no such key.
        TypeMismatch: If the key holds a non-string value.
    """
    if not isinstance(obj, Mapping) or key not in obj:
        raise FieldMissing(key)
    value = obj[key]
    if not isinstance(value, str):
        raise TypeMismatch(key, "string", value)
    return value


def has_string(obj: Any, key: str) -> bool:
    """True only when obj[key] exists and is a string."""
    try:
        get_string(obj, key)
    except (FieldMissing, TypeMismatch):
        return False
    return True
