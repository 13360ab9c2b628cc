"""Query engine types shared by term parsers and evaluators.

Provides:
- CaseSensitivity / NameScope: enums fixed when a term compiles
- Query: the compiled query handle passed to term parsers
- FileRecord / QueryContext: contracts consumed by term evaluation
- FileResult / EvaluationContext: concrete implementations of those contracts
- QueryExpr: abstract base class for compiled expression nodes
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.utils.constants import (
    CANONICAL_SEPARATOR,
    CASE_INSENSITIVE,
    CASE_SENSITIVE,
    SCOPE_BASENAME,
    SCOPE_WHOLENAME,
)


class CaseSensitivity(str, Enum):
    """Comparison mode for string matching terms."""

    SENSITIVE = CASE_SENSITIVE
    INSENSITIVE = CASE_INSENSITIVE


class NameScope(str, Enum):
    """Projection of the file record compared by a name term."""

    BASENAME = SCOPE_BASENAME
    WHOLENAME = SCOPE_WHOLENAME


class Query(BaseModel):
    """Compiled query handle.

    Carries the query-wide settings that term parsers consult while
    compiling. Immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    case_sensitive: CaseSensitivity = Field(
        default=CaseSensitivity.SENSITIVE,
        description="Default case sensitivity for terms that do not force one",
    )


class FileRecord(Protocol):
    """A candidate file produced by the file walk."""

    def base_name(self) -> str: ...


class QueryContext(Protocol):
    """Per-file evaluation context."""

    def whole_name(self) -> str: ...


class FileResult(BaseModel):
    """File record backed by a path relative to the query root."""

    model_config = ConfigDict(frozen=True)

    path: StrictStr = Field(..., description="'/'-separated path relative to the root")

    def base_name(self) -> str:
        return self.path.rsplit(CANONICAL_SEPARATOR, 1)[-1]


class EvaluationContext(BaseModel):
    """Evaluation context for a single `FileResult`."""

    model_config = ConfigDict(frozen=True)

    file: FileResult

    def whole_name(self) -> str:
        return self.file.path


class QueryExpr(ABC):
    """Compiled node of a query expression tree."""

    @abstractmethod
    def evaluate(self, ctx: QueryContext, file: FileRecord) -> bool:
        """Return True when `file` satisfies this expression."""
