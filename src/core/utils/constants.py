"""Global constants used throughout the application.

This module centralizes the term names, scope names, error codes and
configuration keys shared by the query engine and the Lambda handlers.
Using constants prevents hardcoding values and makes it easy to change
them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_TERM_SYNTAX = "TERM_SYNTAX_ERROR"
ERROR_CODE_UNKNOWN_TERM = "UNKNOWN_TERM"


# ============================================================================
# Query Terms
# ============================================================================

TERM_NAME: Final[str] = "name"
TERM_INAME: Final[str] = "iname"

SCOPE_BASENAME: Final[str] = "basename"
SCOPE_WHOLENAME: Final[str] = "wholename"

# ["name", pattern] or ["name", pattern, scope]
NAME_TERM_MIN_ARGS = 2
NAME_TERM_MAX_ARGS = 3

# ============================================================================
# Path Handling
# ============================================================================

CANONICAL_SEPARATOR: Final[str] = "/"

# ============================================================================
# Case Sensitivity
# ============================================================================

CASE_SENSITIVE = "sensitive"
CASE_INSENSITIVE = "insensitive"
DEFAULT_CASE_SENSITIVITY = CASE_SENSITIVE

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"

MAX_FILES_PER_REQUEST = 10_000

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_DEFAULT_CASE_SENSITIVITY = "QUERY_DEFAULT_CASE_SENSITIVITY"

# ============================================================================
# Metrics
# ============================================================================

METRIC_FILES_MATCHED = "FilesMatched"
METRIC_TERM_SYNTAX_ERRORS = "TermSyntaxErrors"
