"""
Pydantic models for query files request and response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from core.utils.constants import MAX_FILES_PER_REQUEST


class QueryFilesRequest(BaseModel):
    """
    Validation model for the query files API.

    The expression is a raw JSON term such as
    ["iname", ["foo.txt", "bar.txt"], "basename"]; its shape is validated
    by the term parser, not here.
    """

    model_config = ConfigDict(extra="forbid")

    expression: list[Any] = Field(
        ...,
        min_length=1,
        description="Query term as a JSON array",
    )
    files: list[StrictStr] = Field(
        default_factory=list,
        max_length=MAX_FILES_PER_REQUEST,
        description="Candidate paths relative to the query root",
    )
    case_sensitive: StrictBool | None = Field(
        None,
        description="Query-wide case sensitivity; configured default when omitted",
    )


class QueryFilesResponse(BaseModel):
    """Files matched by the query expression."""

    files: list[StrictStr] = Field(..., description="Matching paths, in request order")
    matched_count: StrictInt = Field(..., description="Number of matching paths")
    total_count: StrictInt = Field(..., description="Number of candidate paths")
