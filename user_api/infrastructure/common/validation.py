"""Translation of request validation errors into domain validation errors."""

from collections.abc import Iterable, Mapping
from typing import Any

from user_api.domain.common.exceptions import ValidationError

INVALID_BODY_MESSAGE = "Invalid request body"

# Pydantic error types that mean the payload is not a JSON object at all
_BODY_ERROR_TYPES = frozenset({"json_invalid", "model_type", "model_attributes_type", "dict_type"})


def _reason(error: Mapping[str, Any]) -> str:
    error_type = error.get("type")
    ctx = error.get("ctx") or {}

    if error_type == "missing" or error.get("input") in (None, ""):
        return "is required"
    if error_type == "string_too_short":
        return f"must be at least {ctx.get('min_length')} characters"
    if error_type == "string_too_long":
        return f"must be at most {ctx.get('max_length')} characters"
    if error_type == "date_format":
        return f"must be a valid date in format {ctx.get('format')}"
    return "is invalid"


def is_body_error(errors: Iterable[Mapping[str, Any]]) -> bool:
    """Return True when the body could not be read as a JSON object."""
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if error.get("type") in _BODY_ERROR_TYPES or loc == ("body",):
            return True
    return False


def to_validation_error(errors: Iterable[Mapping[str, Any]]) -> ValidationError:
    """
    Build a ValidationError from pydantic error dicts.

    Only the first error per field is kept. A payload that is not a
    JSON object yields a single "Invalid request body" error.

    Args:
        errors: Output of ``RequestValidationError.errors()``

    Returns:
        ValidationError mapping each failing field to a reason
    """
    errors = list(errors)
    if is_body_error(errors):
        return ValidationError(message=INVALID_BODY_MESSAGE)

    field_errors: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        field_errors.setdefault(field, _reason(error))
    return ValidationError.from_errors(field_errors)
