"""Apply a compiled query term to a list of file paths."""

from core.models.query import EvaluationContext, FileResult, QueryExpr


class TermFilter:
    """Filter relative file paths with a compiled expression.

    Each path is wrapped in a `FileResult` and evaluated independently.
    Input order is preserved in the result.
    """

    @staticmethod
    def apply(expr: QueryExpr, paths: list[str]) -> list[str]:
        """Return the paths for which `expr` evaluates to True."""
        matched: list[str] = []

        for path in paths:
            file = FileResult(path=path)
            if expr.evaluate(EvaluationContext(file=file), file):
                matched.append(path)

        return matched
