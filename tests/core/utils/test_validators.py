"""Unit tests for request validation utilities."""

import json
from typing import Any

from pydantic import BaseModel

from core.utils.validators import (
    sanitize_validation_errors,
    validate_request,
)


class SampleModel(BaseModel):
    """Sample model for validation tests."""

    expression: list[Any]
    files: list[str] = []


class TestSanitizeValidationErrors:
    """Tests for sanitize_validation_errors."""

    def test_sanitizes_required_field(self) -> None:
        errors = [{"loc": ("expression",), "msg": "Field required"}]

        result = sanitize_validation_errors(errors)

        assert result == [{"field": "expression", "message": "This field is required"}]

    def test_defaults_field_to_body(self) -> None:
        errors = [{"msg": "Invalid value"}]

        result = sanitize_validation_errors(errors)

        assert result == [{"field": "body", "message": "Invalid value"}]

    def test_removes_value_error_prefix(self) -> None:
        errors = [{"loc": ("files",), "msg": "Value error, too many files"}]

        result = sanitize_validation_errors(errors)

        assert result == [{"field": "files", "message": "too many files"}]

    def test_rewrites_list_and_string_type_errors(self) -> None:
        errors = [
            {"loc": ("expression",), "msg": "Input should be a valid list"},
            {"loc": ("files", 0), "msg": "Input should be a valid string"},
        ]

        result = sanitize_validation_errors(errors)

        assert result == [
            {"field": "expression", "message": "Expected an array"},
            {"field": "files.0", "message": "Expected a string"},
        ]


class TestValidateRequest:
    """Tests for validate_request."""

    def test_validate_request_success(self) -> None:
        data: dict[str, Any] = {"expression": ["name", "a.c"], "files": ["a.c"]}

        is_valid, result = validate_request(SampleModel, data)

        assert is_valid is True
        assert isinstance(result, SampleModel)
        assert result.expression == ["name", "a.c"]

    def test_validate_request_missing_required_field(self) -> None:
        is_valid, result = validate_request(
            SampleModel,
            {},
            request_id="req-1",
            cors_origin="*",
        )

        assert is_valid is False
        assert result["statusCode"] == 422

        body = json.loads(result["body"])

        assert body["message"] == "Invalid request payload"
        assert body["request_id"] == "req-1"
        assert body["details"][0]["field"] == "expression"
        assert body["details"][0]["message"] == "This field is required"
        assert result["headers"]["Access-Control-Allow-Origin"] == "*"
