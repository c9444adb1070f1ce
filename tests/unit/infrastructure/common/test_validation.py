"""Tests for request validation error translation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from user_api.infrastructure.common.validation import to_validation_error
from user_api.infrastructure.users.schemas import CreateUserRequest


def errors_for(payload: object) -> list[dict[str, object]]:
    with pytest.raises(PydanticValidationError) as exc_info:
        CreateUserRequest.model_validate(payload)
    # FastAPI reports body errors with a leading "body" segment
    return [{**error, "loc": ("body", *error["loc"])} for error in exc_info.value.errors()]


class TestToValidationError:
    """Test suite for to_validation_error."""

    def test_missing_fields(self) -> None:
        error = to_validation_error(errors_for({}))
        assert error.errors == {"name": "is required", "dob": "is required"}
        assert error.message == "name is required; dob is required"

    def test_null_name_is_required(self) -> None:
        error = to_validation_error(errors_for({"name": None, "dob": "1990-05-10"}))
        assert error.errors == {"name": "is required"}

    def test_name_too_long(self) -> None:
        error = to_validation_error(errors_for({"name": "x" * 300, "dob": "1990-05-10"}))
        assert error.errors == {"name": "must be at most 255 characters"}

    def test_bad_date(self) -> None:
        error = to_validation_error(errors_for({"name": "Ada", "dob": "2021-02-30"}))
        assert error.errors == {"dob": "must be a valid date in format YYYY-MM-DD"}

    def test_wrong_type(self) -> None:
        error = to_validation_error(errors_for({"name": 42, "dob": "1990-05-10"}))
        assert error.errors == {"name": "is invalid"}

    def test_invalid_json(self) -> None:
        errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"}]
        error = to_validation_error(errors)
        assert error.message == "Invalid request body"
        assert error.errors == {}

    def test_body_not_an_object(self) -> None:
        errors = [{"type": "model_attributes_type", "loc": ("body",), "input": [1, 2]}]
        assert to_validation_error(errors).message == "Invalid request body"
