"""
Limit-offset pagination strategy.

Requests select a window with a ``limit`` (page size) and an ``offset``
(items to skip). Responses carry the total ``count``, the page
``results`` and ``next`` / ``previous`` continuation links encoded as
query strings, e.g. ``limit=20&offset=40``.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from lambda_pagination.models.errors import InvalidPageError
from lambda_pagination.models.pagination import (
    Page,
    PaginationEnvelope,
    PaginationParams,
    StrategyConfig,
)
from lambda_pagination.strategies.base import PaginationReply, QueryParams
from lambda_pagination.utils.config import load_strategy_config
from lambda_pagination.utils.constants import (
    DEFAULT_LIMIT,
    DEFAULT_LIMIT_PARAMETER,
    DEFAULT_MAX_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_OFFSET_PARAMETER,
    LINK_LIMIT_KEY,
    LINK_OFFSET_KEY,
)
from lambda_pagination.utils.querystring import encode_query, parse_leading_int

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_LIMIT_PARAMETER",
    "DEFAULT_MAX_LIMIT",
    "DEFAULT_OFFSET_PARAMETER",
    "LimitOffsetStrategy",
    "build_envelope",
    "create_strategy",
    "create_strategy_from_env",
    "parse_pagination",
]

logger = Logger(UTC=True)

# camelCase option name -> field name
_OPTION_NAMES: dict[str, str] = {
    field.alias: name
    for name, field in StrategyConfig.model_fields.items()
    if field.alias
}


def _normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    return {_OPTION_NAMES.get(key, key): value for key, value in options.items()}


def parse_pagination(
    config: StrategyConfig,
    query: QueryParams | None,
) -> PaginationParams:
    """
    Resolve limit and offset from raw query parameters.

    Values are parsed leniently: the leading integer of the raw value is
    used and anything after it is ignored. A missing or non-numeric limit
    falls back to ``config.default_limit`` and a parsed limit is capped at
    ``config.maximum_limit``. A missing or non-numeric offset becomes 0.

    Never raises for any query content.

    Args:
        config: Strategy configuration
        query: Raw query parameters as received on the wire

    Returns:
        Resolved pagination parameters
    """
    query = query or {}

    limit = parse_leading_int(query.get(config.limit_parameter))
    offset = parse_leading_int(query.get(config.offset_parameter))

    if limit is None:
        limit = config.default_limit
    if offset is None:
        offset = DEFAULT_OFFSET

    # Only an upper clamp; negative limits pass through.
    limit = min(limit, config.maximum_limit)

    return PaginationParams(limit=limit, offset=offset)


def build_envelope(
    config: StrategyConfig,
    query: QueryParams | None,
    page: Page | Mapping[str, Any],
) -> PaginationEnvelope:
    """
    Wrap a page of results with its continuation links.

    Limit and offset are re-derived from ``query`` rather than taken from
    the caller, so the links always describe what was actually requested.

    Args:
        config: Strategy configuration
        query: Raw query parameters of the request being answered
        page: Current page, as a ``Page`` or a ``{count, page}`` mapping

    Returns:
        Envelope with ``count``, ``next``, ``previous`` and ``results``

    Raises:
        InvalidPageError: If a mapping page lacks a usable count or items
    """
    if not isinstance(page, Page):
        try:
            page = Page.model_validate(dict(page))
        except ValidationError as exc:
            fields = sorted(
                {".".join(str(part) for part in err["loc"]) for err in exc.errors()}
            )
            # Field locations only; input values stay out of the error.
            raise InvalidPageError(
                message="Page must provide an integer count and a list of items",
                details={"fields": fields},
            ) from exc

    params = parse_pagination(config, query)
    limit, offset = params.limit, params.offset

    next_link: str | None = None
    if offset + limit < page.count:
        next_link = encode_query(
            {LINK_LIMIT_KEY: limit, LINK_OFFSET_KEY: offset + limit}
        )

    previous_link: str | None = None
    if offset - limit >= 0:
        previous_link = encode_query(
            {LINK_LIMIT_KEY: limit, LINK_OFFSET_KEY: offset - limit}
        )

    return PaginationEnvelope(
        count=page.count,
        next=next_link,
        previous=previous_link,
        results=page.items,
    )


class LimitOffsetStrategy:
    """
    Limit-offset strategy bound to a fixed configuration.

    Instances hold no per-request state and may be shared between
    concurrent requests.
    """

    def __init__(self, config: StrategyConfig | None = None) -> None:
        self._config: StrategyConfig = config or StrategyConfig()

    @property
    def config(self) -> StrategyConfig:
        return self._config

    def parse_pagination(self, query: QueryParams | None) -> PaginationParams:
        return parse_pagination(self._config, query)

    def build_envelope(
        self,
        query: QueryParams | None,
        page: Page | Mapping[str, Any],
    ) -> PaginationEnvelope:
        return build_envelope(self._config, query, page)

    def send_with_pagination(
        self,
        reply: PaginationReply,
        page: Page | Mapping[str, Any],
    ) -> None:
        """Send the envelope for ``page`` through ``reply``.

        Failures raised by ``reply.send`` propagate to the caller.
        """
        envelope = self.build_envelope(reply.request.query, page)
        reply.send(envelope.model_dump(mode="json"))

    def __repr__(self) -> str:
        return f"LimitOffsetStrategy({self._config!r})"


def create_strategy(
    options: StrategyConfig | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> LimitOffsetStrategy:
    """
    Build a limit-offset strategy from partial options.

    Omitted options, and options given as ``None``, take the defaults
    (limit 20, maximum 100, parameters ``limit`` / ``offset``). Keyword
    overrides win over ``options``. Both snake_case and camelCase option
    names are accepted.

    Example:
        create_strategy({"defaultLimit": 50}, maximum_limit=500)
    """
    if isinstance(options, StrategyConfig):
        merged: dict[str, Any] = options.model_dump()
    else:
        merged = _normalize_options(options or {})
    merged.update(_normalize_options(overrides))

    supplied = {key: value for key, value in merged.items() if value is not None}
    config = StrategyConfig.model_validate(supplied)

    logger.debug(
        "Pagination strategy configured",
        extra={"strategy": "limit_offset", **config.model_dump()},
    )

    return LimitOffsetStrategy(config)


def create_strategy_from_env(
    environ: Mapping[str, str] | None = None,
) -> LimitOffsetStrategy:
    """Build a limit-offset strategy from ``PAGINATION_*`` environment variables."""
    return create_strategy(load_strategy_config(environ))
