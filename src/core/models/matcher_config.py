"""Immutable configuration for the name term matcher."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.models.query import CaseSensitivity, NameScope


class MatcherConfig(BaseModel):
    """Compiled arguments of a "name" / "iname" term.

    Exactly one comparison source is active:
    - `pattern_set` when the term was given an array of patterns, with every
      element separator-normalized and, when case-insensitive, case-folded
    - `literal` when the term was given a single string, separator-normalized
      but stored in its original case
    """

    model_config = ConfigDict(frozen=True)

    literal: str | None = Field(None, description="Single pattern (string argument)")
    pattern_set: frozenset[str] = Field(
        default_factory=frozenset,
        description="Pattern set (array argument)",
    )
    case_mode: CaseSensitivity = CaseSensitivity.SENSITIVE
    scope: NameScope = NameScope.BASENAME

    @model_validator(mode="after")
    def validate_single_source(self) -> "MatcherConfig":
        """Ensure exactly one of literal / pattern_set is populated."""
        if self.literal is None and not self.pattern_set:
            raise ValueError("MatcherConfig requires a literal or a pattern set")
        if self.literal is not None and self.pattern_set:
            raise ValueError("MatcherConfig cannot hold both a literal and a pattern set")
        return self

    @property
    def uses_pattern_set(self) -> bool:
        return bool(self.pattern_set)

    @property
    def case_insensitive(self) -> bool:
        return self.case_mode is CaseSensitivity.INSENSITIVE
