"""Submission Validation — pure required-field checks over decoded request bodies.

Invariants:
    - Pure functions: no IO, no logging, no mutation of the body
    - Missing fields reported in the schema's declaration order
    - A field counts as missing when absent, not a string, or an empty string

Design Decisions:
    - Schema passed in as an argument: core stays independent of the API schemas package
    - Pydantic errors collapsed to field names: the client sees one message per endpoint,
      the field list is kept on the exception for logs and tests
"""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from blogsphere.core.errors import MissingFieldsError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

EMAIL_REQUIRED = "Email is required"
ALL_FIELDS_REQUIRED = "All fields are required"


def find_missing_fields(
    body: Mapping[str, Any], schema: type[BaseModel],
) -> list[str]:
    """Return the required fields of schema that body does not satisfy (empty = valid)."""
    try:
        schema.model_validate(dict(body))
    except ValidationError as exc:
        return _failed_fields(exc, schema)
    return []


def decode_submission(
    body: Mapping[str, Any], schema: type[SchemaT], message: str,
) -> SchemaT:
    """Decode body into schema or raise MissingFieldsError carrying message."""
    try:
        return schema.model_validate(dict(body))
    except ValidationError as exc:
        raise MissingFieldsError(_failed_fields(exc, schema), message) from None


def _failed_fields(exc: ValidationError, schema: type[BaseModel]) -> list[str]:
    failed = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
    return [name for name in schema.model_fields if name in failed]
