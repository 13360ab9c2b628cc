"""
Lambda handler responsible for matching file paths against a query term.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import TermSyntaxError, ValidationError
from core.terms.registry import build_term_registry
from core.utils.constants import METRIC_FILES_MATCHED, METRIC_TERM_SYNTAX_ERRORS
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import QueryFilesRequest, QueryFilesResponse
from .service import QueryFilesService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()

# Composed once per execution environment, before any query compiles.
TERM_REGISTRY = build_term_registry()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to filter file paths with a query term.

    Expected API Gateway event structure:
    {
        "body": "{\"expression\": [\"name\", \"foo.c\"], \"files\": [...]}"
    }

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response listing the matching paths
    """
    request_id = getattr(context, "aws_request_id", None)

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request("Invalid JSON body", request_id=request_id)

    if not isinstance(body, dict):
        raise ValidationError(
            message="Expected a JSON object body",
            details={"body_type": type(body).__name__},
        )

    is_valid, result = validate_request(QueryFilesRequest, body, request_id=request_id)
    if not is_valid:
        return result

    request: QueryFilesRequest = result
    service = QueryFilesService(TERM_REGISTRY)

    try:
        matched = service.query_files(
            expression=request.expression,
            files=request.files,
            case_sensitive=request.case_sensitive,
        )
    except TermSyntaxError as exc:
        metrics.add_metric(name=METRIC_TERM_SYNTAX_ERRORS, unit=MetricUnit.Count, value=1)
        return ResponseBuilder.bad_request(
            exc.message,
            error=exc.error_code,
            details=exc.details,
            request_id=request_id,
        )

    metrics.add_metric(name=METRIC_FILES_MATCHED, unit=MetricUnit.Count, value=len(matched))

    response = QueryFilesResponse(
        files=matched,
        matched_count=len(matched),
        total_count=len(request.files),
    )

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
