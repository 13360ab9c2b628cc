"""
Business logic for matching file paths against a query term.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.filters.term_filter import TermFilter
from core.models.query import CaseSensitivity, Query
from core.terms.registry import TermRegistry
from core.utils.settings import get_default_case_sensitivity

logger = Logger(UTC=True)


class QueryFilesService:
    """Application service that compiles a term and filters file paths.

    This service coordinates:
    - Resolving the query-wide case sensitivity
    - Compiling the raw term through the term registry
    - Evaluating the compiled term against every candidate path
    """

    def __init__(self, registry: TermRegistry) -> None:
        self.registry = registry
        self.filter = TermFilter()

    @staticmethod
    def build_query(case_sensitive: bool | None) -> Query:
        """Build the compiled query handle passed to term parsers."""
        if case_sensitive is None:
            mode = get_default_case_sensitivity()
        elif case_sensitive:
            mode = CaseSensitivity.SENSITIVE
        else:
            mode = CaseSensitivity.INSENSITIVE

        return Query(case_sensitive=mode)

    def query_files(
        self,
        *,
        expression: list[Any],
        files: list[str],
        case_sensitive: bool | None = None,
    ) -> list[str]:
        """Return the paths in `files` matched by `expression`.

        Raises:
            TermSyntaxError: If the expression cannot be compiled
        """
        query = self.build_query(case_sensitive)
        expr = self.registry.parse_term(query, expression)

        matched = self.filter.apply(expr, files)

        logger.info(
            "Files queried successfully",
            extra={
                "term": expression[0] if expression else None,
                "case_sensitive": query.case_sensitive.value,
                "total": len(files),
                "matched": len(matched),
            },
        )
        return matched
