"""
Pytest configuration and fixtures for file query tests.
Provides compiled query handles, file records and a composed term registry.
"""

import os
from collections.abc import Callable

import pytest

from core.models.query import (
    CaseSensitivity,
    EvaluationContext,
    FileResult,
    Query,
    QueryExpr,
)
from core.terms.registry import TermRegistry, build_term_registry

os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "file-query-service")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "FileQueryService")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")


@pytest.fixture
def sensitive_query() -> Query:
    return Query(case_sensitive=CaseSensitivity.SENSITIVE)


@pytest.fixture
def insensitive_query() -> Query:
    return Query(case_sensitive=CaseSensitivity.INSENSITIVE)


@pytest.fixture
def term_registry() -> TermRegistry:
    """Frozen registry with the built-in terms."""
    return build_term_registry()


@pytest.fixture
def evaluate_path() -> Callable[[QueryExpr, str], bool]:
    """
    Helper to evaluate a compiled term against a single relative path.

    Usage:
        assert evaluate_path(expr, "src/main.c")
    """

    def _evaluate(expr: QueryExpr, path: str) -> bool:
        file = FileResult(path=path)
        return expr.evaluate(EvaluationContext(file=file), file)

    return _evaluate


@pytest.fixture
def sample_paths() -> list[str]:
    """Candidate paths relative to the query root."""
    return [
        "README.md",
        "src/main.c",
        "src/Main.C",
        "src/util/foo.txt",
        "docs/FOO.TXT",
        "docs/foo.txtx",
        "tests/bar.TXT",
    ]
