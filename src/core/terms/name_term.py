"""
"name" and "iname" query terms.

Matches a file's basename, or its full path relative to the query root,
against one literal string or a set of literal strings. Wire shape:

    ["name", <string | [string, ...]>]
    ["name", <string | [string, ...]>, "basename" | "wholename"]

"iname" accepts the identical shape and always compares case-insensitively;
"name" follows the query's case sensitivity.
"""

from typing import Any, TYPE_CHECKING

from aws_lambda_powertools import Logger

from core.models.errors import TermSyntaxError
from core.models.matcher_config import MatcherConfig
from core.models.query import (
    CaseSensitivity,
    FileRecord,
    NameScope,
    Query,
    QueryContext,
    QueryExpr,
)
from core.utils.constants import (
    NAME_TERM_MAX_ARGS,
    NAME_TERM_MIN_ARGS,
    TERM_INAME,
    TERM_NAME,
)
from core.utils.strings import equal_caseless, normalize_separators, to_lower

if TYPE_CHECKING:
    from core.terms.registry import TermRegistry

logger = Logger(UTC=True)


def _syntax_error(which: str, message: str, **details: Any) -> TermSyntaxError:
    logger.warning(
        "Rejected query term",
        extra={"term": which, "error": message, **details},
    )
    return TermSyntaxError(message=message, details={"term": which, **details})


def _parse_scope(term: list[Any], which: str) -> NameScope:
    if len(term) < NAME_TERM_MAX_ARGS:
        return NameScope.BASENAME

    scope = term[2]
    if not isinstance(scope, str):
        raise _syntax_error(which, f"Argument 3 to '{which}' must be a string")

    try:
        return NameScope(scope)
    except ValueError:
        raise _syntax_error(
            which,
            f"Invalid scope '{scope}' for {which} expression",
            scope=scope,
        ) from None


def _build_pattern_set(
    patterns: list[Any],
    case_mode: CaseSensitivity,
    which: str,
) -> frozenset[str]:
    # Validate every element before building anything.
    if any(not isinstance(pattern, str) for pattern in patterns):
        raise _syntax_error(
            which,
            f"Argument 2 to '{which}' must be either a string or an array of string",
        )
    if not patterns:
        raise _syntax_error(which, f"Argument 2 to '{which}' must not be an empty array")

    if case_mode is CaseSensitivity.INSENSITIVE:
        return frozenset(normalize_separators(to_lower(p)) for p in patterns)
    return frozenset(normalize_separators(p) for p in patterns)


class NameExpr(QueryExpr):
    """Compiled "name" / "iname" term.

    Instances are built by `parse` from a fully validated `MatcherConfig`
    and never change afterwards, so one instance can be evaluated from
    many threads at once.
    """

    def __init__(self, config: MatcherConfig) -> None:
        self.config = config
        self._literal = config.literal
        self._patterns = config.pattern_set
        self._use_set = config.uses_pattern_set
        self._fold = config.case_insensitive
        self._wholename = config.scope is NameScope.WHOLENAME

    def __repr__(self) -> str:
        return f"NameExpr({self.config!r})"

    def evaluate(self, ctx: QueryContext, file: FileRecord) -> bool:
        candidate = ctx.whole_name() if self._wholename else file.base_name()

        if self._use_set:
            # Set elements were folded at parse time.
            if self._fold:
                candidate = to_lower(candidate)
            return candidate in self._patterns

        # Literal is stored unfolded; fold per comparison.
        if self._fold:
            return equal_caseless(candidate, self._literal)
        return candidate == self._literal

    @classmethod
    def parse(
        cls,
        query: Query,
        term: Any,
        case_mode: CaseSensitivity,
        which: str = TERM_NAME,
    ) -> "NameExpr":
        """Validate a raw term and compile it.

        Args:
            query: Compiled query handle (unused beyond the entry points)
            term: Raw JSON term, e.g. ["name", "foo.c", "basename"]
            case_mode: Comparison mode fixed for this term
            which: Term name used in error messages

        Returns:
            Compiled NameExpr

        Raises:
            TermSyntaxError: If the term is malformed
        """
        if not isinstance(term, list):
            raise _syntax_error(which, f"Expected array for '{which}' term")

        if not NAME_TERM_MIN_ARGS <= len(term) <= NAME_TERM_MAX_ARGS:
            raise _syntax_error(
                which,
                f"Invalid number of arguments for '{which}' term",
                arg_count=len(term),
            )

        scope = _parse_scope(term, which)
        pattern = term[1]

        if isinstance(pattern, list):
            config = MatcherConfig(
                pattern_set=_build_pattern_set(pattern, case_mode, which),
                case_mode=case_mode,
                scope=scope,
            )
        elif isinstance(pattern, str):
            config = MatcherConfig(
                literal=normalize_separators(pattern),
                case_mode=case_mode,
                scope=scope,
            )
        else:
            raise _syntax_error(
                which,
                f"Argument 2 to '{which}' must be either a string or an array of string",
            )

        logger.debug(
            "Compiled query term",
            extra={
                "term": which,
                "scope": scope.value,
                "case_mode": case_mode.value,
                "pattern_count": len(config.pattern_set) or 1,
            },
        )
        return cls(config)

    @classmethod
    def parse_name(cls, query: Query, term: Any) -> "NameExpr":
        """Parse a "name" term using the query's case sensitivity."""
        return cls.parse(query, term, query.case_sensitive, TERM_NAME)

    @classmethod
    def parse_iname(cls, query: Query, term: Any) -> "NameExpr":
        """Parse an "iname" term, always case-insensitive."""
        return cls.parse(query, term, CaseSensitivity.INSENSITIVE, TERM_INAME)


def register_name_terms(registry: "TermRegistry") -> None:
    """Register the "name" and "iname" parsers."""
    registry.register(TERM_NAME, NameExpr.parse_name)
    registry.register(TERM_INAME, NameExpr.parse_iname)
