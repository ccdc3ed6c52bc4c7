"""Structural validator: runs a JSON Schema against a document.

Evaluation is delegated to the jsonschema library. Every violation in the
document tree is collected (iter_errors), rendered as one line, and kept in
the engine's traversal order.
"""

from typing import Any, Dict, List, Union

import jsonschema
import referencing
import referencing.exceptions
import referencing.jsonschema
from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.protocols import Validator

from sbomvalidator._internal.json_value import JsonInput, json_type_name, parse_json
from sbomvalidator._internal.logging_config import get_logger
from sbomvalidator.contracts import SchemaDocument, ValidationResult
from sbomvalidator.errors import InvalidSchemaError, MalformedJSONError

logger = get_logger(__name__)

SchemaInput = Union[SchemaDocument, JsonInput]


def _as_schema_document(schema: SchemaInput) -> SchemaDocument:
    if isinstance(schema, SchemaDocument):
        return schema
    if isinstance(schema, (bytes, bytearray)):
        try:
            schema = bytes(schema).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidSchemaError(f"invalid schema format: {e}") from e
    return SchemaDocument(content=schema)


def _parse_schema_text(text: str, key: str) -> Any:
    try:
        return parse_json(text)
    except ValueError as e:
        raise InvalidSchemaError(f"invalid schema format ({key}): {e}", key=key) from e


def _build_registry(resources: Dict[str, str]) -> referencing.Registry:
    """Registry of sibling schemas, addressable by file name and by $id."""
    registry: referencing.Registry = referencing.Registry()
    for name, text in sorted(resources.items()):
        contents = _parse_schema_text(text, name)
        resource = referencing.Resource.from_contents(
            contents, default_specification=referencing.jsonschema.DRAFT7
        )
        registry = registry.with_resource(name, resource)
        if isinstance(contents, dict) and isinstance(contents.get("$id"), str):
            registry = registry.with_resource(contents["$id"], resource)
    return registry


def json_pointer(path) -> str:
    """RFC 6901 pointer for an error path; "(root)" for the document itself."""
    if not path:
        return "(root)"
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in path
    )


def render_violation(error: ValidationError) -> str:
    """One-line description: location, message, failing keyword."""
    return f"{json_pointer(error.absolute_path)}: {error.message} ({error.validator})"


def compile_validator(schema: SchemaInput) -> Validator:
    """Build a validator for a schema document.

    The draft is taken from the schema's ``$schema`` (draft-07 if absent).

    Raises:
        InvalidSchemaError: If the schema is not JSON or not a valid schema.
    """
    document = _as_schema_document(schema)
    contents = _parse_schema_text(document.content, document.key)
    if not isinstance(contents, (dict, bool)):
        raise InvalidSchemaError(
            f"invalid schema format ({document.key}): expected an object, got {json_type_name(contents)}",
            key=document.key,
        )

    validator_cls = jsonschema.validators.validator_for(contents, default=jsonschema.Draft7Validator)
    try:
        validator_cls.check_schema(contents)
    except SchemaError as e:
        raise InvalidSchemaError(f"invalid schema format ({document.key}): {e.message}", key=document.key) from e

    return validator_cls(
        contents,
        registry=_build_registry(document.resources),
        format_checker=validator_cls.FORMAT_CHECKER,
    )


def collect_violations(validator: Validator, instance: Any, key: str = "<inline>") -> List[str]:
    """Evaluate every keyword and return all violations.

    Raises:
        InvalidSchemaError: If a $ref cannot be resolved.
        MalformedJSONError: If evaluation recurses past the interpreter's
            limit, which happens for documents nested too deeply.
    """
    try:
        return [render_violation(error) for error in validator.iter_errors(instance)]
    except referencing.exceptions.Unresolvable as e:
        raise InvalidSchemaError(f"invalid schema format ({key}): unresolvable reference {e}", key=key) from e
    except RecursionError as e:
        raise MalformedJSONError(f"document nesting too deep to evaluate against {key}") from e


def validate_against_schema(schema: SchemaInput, document: JsonInput) -> ValidationResult:
    """Validate raw JSON text against a schema.

    The document is re-parsed here even if an earlier stage parsed it, so
    this function can be called on its own.

    Args:
        schema: A resolved SchemaDocument, or schema JSON text.
        document: The document as JSON text (bytes or str).

    Returns:
        ValidationResult with valid=False and every violation when the
        document does not conform.

    Raises:
        MalformedJSONError: If the document is not valid JSON.
        InvalidSchemaError: If the schema cannot be loaded or compiled, or a
            $ref in it cannot be resolved.
    """
    try:
        instance = parse_json(document)
    except (ValueError, TypeError) as e:
        raise MalformedJSONError(f"invalid JSON format: {e}") from e

    schema_document = _as_schema_document(schema)
    validator = compile_validator(schema_document)
    violations = collect_violations(validator, instance, schema_document.key)

    logger.info(
        "sbom_validated",
        schema=schema_document.key,
        valid=not violations,
        violations=len(violations),
    )
    return ValidationResult(
        valid=not violations,
        violations=violations,
        dialect=schema_document.dialect,
        version=schema_document.version,
        schema_key=schema_document.key if schema_document.dialect is not None else None,
    )
