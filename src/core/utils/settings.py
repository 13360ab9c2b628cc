"""Environment-driven configuration."""

import os

from aws_lambda_powertools import Logger

from core.models.query import CaseSensitivity
from core.utils.constants import (
    DEFAULT_CASE_SENSITIVITY,
    ENV_DEFAULT_CASE_SENSITIVITY,
)

logger = Logger(UTC=True)


def get_default_case_sensitivity() -> CaseSensitivity:
    """Return the query-wide case sensitivity default.

    Read from QUERY_DEFAULT_CASE_SENSITIVITY. Unknown values fall back to
    case-sensitive matching.
    """
    raw = os.getenv(ENV_DEFAULT_CASE_SENSITIVITY, DEFAULT_CASE_SENSITIVITY)
    value = raw.strip().lower()

    try:
        return CaseSensitivity(value)
    except ValueError:
        logger.warning(
            "Unknown case sensitivity setting, using default",
            extra={
                "env_var": ENV_DEFAULT_CASE_SENSITIVITY,
                "value": raw,
                "default": DEFAULT_CASE_SENSITIVITY,
            },
        )
        return CaseSensitivity(DEFAULT_CASE_SENSITIVITY)
