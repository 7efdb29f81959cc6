"""Pagination models."""

from collections.abc import Sequence
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lambda_pagination.utils.constants import (
    DEFAULT_LIMIT,
    DEFAULT_LIMIT_PARAMETER,
    DEFAULT_MAX_LIMIT,
    DEFAULT_OFFSET_PARAMETER,
)


class StrategyConfig(BaseModel):
    """
    Resolved configuration of a limit-offset strategy.

    Options are accepted under their snake_case field names or under the
    camelCase names of the public configuration surface (``defaultLimit``,
    ``maximumLimit``, ``limitParameter``, ``offsetParameter``).

    Limits are deliberately not range checked: negative values are used
    as given.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    limit_parameter: str = Field(
        default=DEFAULT_LIMIT_PARAMETER,
        description="Query key holding the page size",
    )
    offset_parameter: str = Field(
        default=DEFAULT_OFFSET_PARAMETER,
        description="Query key holding the number of items to skip",
    )
    default_limit: int = Field(
        default=DEFAULT_LIMIT,
        description="Limit used when the query carries no usable limit",
    )
    maximum_limit: int = Field(
        default=DEFAULT_MAX_LIMIT,
        description="Upper clamp applied to a parsed limit",
    )


class PaginationParams(BaseModel):
    """Limit and offset resolved for a single request."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(..., description="Maximum number of items to return")
    offset: int = Field(..., description="Number of items to skip")


class Page(BaseModel):
    """
    One window of results plus the total item count.

    ``items`` may also be supplied under the ``page`` key, so a plain
    ``{"count": ..., "page": [...]}`` mapping validates as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(..., description="Total number of items available")
    items: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "page"),
        description="Items of the current page",
    )

    @classmethod
    def from_sequence(cls, items: Sequence[Any], params: PaginationParams) -> "Page":
        """Slice a fully materialized sequence into the requested page.

        A limit of zero or less yields no items, and a negative offset
        starts at the first item, so negative values never select from the
        end of the sequence.

        Example:
            items = [1, 2, 3, 4, 5]
            params = PaginationParams(limit=2, offset=2)

            → Page(count=5, items=[3, 4])
        """
        if params.limit <= 0:
            return cls(count=len(items), items=[])

        start = max(params.offset, 0)
        window = items[start : start + params.limit]
        return cls(count=len(items), items=list(window))


class PaginationEnvelope(BaseModel):
    """Response body of a paginated list endpoint."""

    count: int = Field(..., description="Total number of items available")
    next: str | None = Field(
        None,
        description="Query string of the next page, if any",
    )
    previous: str | None = Field(
        None,
        description="Query string of the previous page, if any",
    )
    results: list[Any] = Field(
        default_factory=list,
        description="Items of the current page",
    )
