"""
Unit tests for QueryFilesRequest / QueryFilesResponse
"""

import pytest
from pydantic import ValidationError

from core.utils.constants import MAX_FILES_PER_REQUEST
from handlers.query_files.models import QueryFilesRequest, QueryFilesResponse


class TestQueryFilesRequest:
    def test_valid_minimal_request(self) -> None:
        req = QueryFilesRequest(expression=["name", "main.c"])

        assert req.expression == ["name", "main.c"]
        assert req.files == []
        assert req.case_sensitive is None

    def test_expression_shape_is_not_validated_here(self) -> None:
        req = QueryFilesRequest(expression=["name", 5, "middle"], files=["a.c"])

        assert req.expression == ["name", 5, "middle"]

    def test_missing_expression_raises(self) -> None:
        with pytest.raises(ValidationError):
            QueryFilesRequest(files=["a.c"])

    def test_empty_expression_raises(self) -> None:
        with pytest.raises(ValidationError):
            QueryFilesRequest(expression=[])

    def test_non_string_file_raises(self) -> None:
        with pytest.raises(ValidationError):
            QueryFilesRequest(expression=["name", "a.c"], files=["a.c", 5])

    def test_case_sensitive_must_be_boolean(self) -> None:
        with pytest.raises(ValidationError):
            QueryFilesRequest(expression=["name", "a.c"], case_sensitive="yes")

    def test_too_many_files_raises(self) -> None:
        with pytest.raises(ValidationError):
            QueryFilesRequest(
                expression=["name", "a.c"],
                files=["a.c"] * (MAX_FILES_PER_REQUEST + 1),
            )

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QueryFilesRequest(expression=["name", "a.c"], root="/tmp")


class TestQueryFilesResponse:
    def test_model_dump(self) -> None:
        resp = QueryFilesResponse(files=["a.c"], matched_count=1, total_count=3)

        assert resp.model_dump() == {
            "files": ["a.c"],
            "matched_count": 1,
            "total_count": 3,
        }
