import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def query_files_event() -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to build an API Gateway event with a JSON body.

    Usage:
        event = query_files_event({"expression": ["name", "a.c"], "files": []})
    """

    def _build(body: dict[str, Any]) -> dict[str, Any]:
        return {
            "httpMethod": "POST",
            "path": "/v1/files/query",
            "body": json.dumps(body),
            "headers": {"x-api-key": "test-api-key"},
        }

    return _build
