"""Term registry mapping term names to their parsers.

Provides:
- Explicit registration: registry.register("name", parser)
- A read-only lookup once `freeze()` has been called
- Dispatch of raw JSON terms to the matching parser
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import TermSyntaxError, UnknownTermError
from core.models.query import Query, QueryExpr

TermParser = Callable[[Query, Any], QueryExpr]

logger = Logger(UTC=True)


class TermRegistry:
    """Registry of query term parsers.

    Populated once during startup composition and frozen before any query
    compiles. A frozen registry is safe to share between threads.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, TermParser] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, parser: TermParser) -> None:
        """Register a parser for a term name.

        Parameters
        ----------
        name : str
            Term name as it appears first in the JSON term
        parser : TermParser
            Callable taking (query, raw_term) and returning a QueryExpr

        Raises
        ------
        ValueError
            If the registry is frozen or the name is already registered
        """
        if self._frozen:
            raise ValueError(f"Cannot register term '{name}': registry is frozen")
        if name in self._parsers:
            raise ValueError(f"Term '{name}' is already registered")

        self._parsers[name] = parser

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        logger.debug("Term registry frozen", extra={"terms": self.names()})

    def get_parser(self, name: str) -> TermParser | None:
        return self._parsers.get(name)

    def names(self) -> list[str]:
        """Sorted list of registered term names."""
        return sorted(self._parsers)

    def parsers(self) -> MappingProxyType[str, TermParser]:
        """Read-only view of the registered parsers."""
        return MappingProxyType(self._parsers)

    def parse_term(self, query: Query, term: Any) -> QueryExpr:
        """Compile a raw JSON term with the parser registered for its name.

        Raises
        ------
        TermSyntaxError
            If the term is not a non-empty array led by a string
        UnknownTermError
            If no parser is registered for the term name
        """
        if not isinstance(term, list) or not term or not isinstance(term[0], str):
            raise TermSyntaxError(
                message="Expected a non-empty array whose first element is a term name",
            )

        name = term[0]
        parser = self._parsers.get(name)
        if parser is None:
            raise UnknownTermError(
                message=f"Unknown expression term '{name}'",
                details={"term": name},
            )

        return parser(query, term)


def build_term_registry() -> TermRegistry:
    """Compose the process-wide term registry.

    Called once at startup; the returned registry is frozen.
    """
    # Imported here so term modules can reference TermRegistry for typing.
    from core.terms.name_term import register_name_terms

    registry = TermRegistry()
    register_name_terms(registry)
    registry.freeze()
    return registry
