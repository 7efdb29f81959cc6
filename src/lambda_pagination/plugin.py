"""
Lambda integration for pagination strategies.

``with_pagination`` turns a ``handler(request, reply)`` function into an
API Gateway Lambda handler. The request exposes ``parse_pagination()`` and
the reply exposes ``send_with_pagination(page)``, both backed by a single
strategy shared across invocations.

Example:
    @api_gateway_handler
    @with_pagination(create_strategy(maximum_limit=50))
    def handler(request, reply):
        params = request.parse_pagination()
        items = repository.list(offset=params.offset, limit=params.limit)
        return reply.send_with_pagination({"count": repository.count(), "page": items})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger

from lambda_pagination.models.errors import InvalidStrategyError, ReplyNotSentError
from lambda_pagination.models.pagination import Page
from lambda_pagination.strategies.base import PaginationStrategy, QueryParams
from lambda_pagination.strategies.limit_offset import create_strategy
from lambda_pagination.utils.constants import QUERY_STRING_PARAMETERS_KEY
from lambda_pagination.utils.response import JsonDict, ResponseBuilder

logger = Logger(UTC=True)


class PaginatedRequest:
    """API Gateway event seen through a pagination strategy."""

    def __init__(
        self,
        *,
        event: Mapping[str, Any],
        context: Any,
        strategy: PaginationStrategy,
    ) -> None:
        self.event = event
        self.context = context
        self.strategy = strategy

    @property
    def query(self) -> QueryParams:
        return self.event.get(QUERY_STRING_PARAMETERS_KEY) or {}

    @property
    def request_id(self) -> str | None:
        return getattr(self.context, "aws_request_id", None)

    def parse_pagination(self) -> Any:
        return self.strategy.parse_pagination(self.query)


class PaginatedReply:
    """Collects the API Gateway response sent for a paginated request."""

    def __init__(
        self,
        *,
        request: PaginatedRequest,
        strategy: PaginationStrategy,
        cors_origin: str | None = None,
    ) -> None:
        self.request = request
        self.strategy = strategy
        self.cors_origin = cors_origin
        self.response: JsonDict | None = None

    @property
    def sent(self) -> bool:
        return self.response is not None

    def send(self, body: JsonDict) -> JsonDict:
        # No request_id here: the body must keep exactly the envelope keys.
        self.response = ResponseBuilder.ok(body, cors_origin=self.cors_origin)
        return self.response

    def send_with_pagination(self, page: Page | Mapping[str, Any]) -> JsonDict:
        self.strategy.send_with_pagination(self, page)
        if self.response is None:
            raise ReplyNotSentError(
                message="Pagination strategy did not send a reply",
                details={"strategy": type(self.strategy).__name__},
            )
        return self.response


PaginatedHandler = Callable[[PaginatedRequest, PaginatedReply], JsonDict | None]


def with_pagination(
    strategy: PaginationStrategy | None = None,
    *,
    cors_origin: str | None = None,
) -> Callable[[PaginatedHandler], Callable[..., JsonDict]]:
    """
    Decorate a paginated handler with a pagination strategy.

    Args:
        strategy: Strategy to use; a default limit-offset strategy if omitted
        cors_origin: Optional CORS origin for sent replies

    Returns:
        Decorator producing an ``(event, context)`` Lambda handler

    Raises:
        InvalidStrategyError: If ``strategy`` is not a pagination strategy
    """
    resolved = strategy if strategy is not None else create_strategy()

    if not isinstance(resolved, PaginationStrategy):
        raise InvalidStrategyError(
            message="Pagination strategy must provide parse_pagination and send_with_pagination",
            details={"strategy": type(resolved).__name__},
        )

    def decorator(func: PaginatedHandler) -> Callable[..., JsonDict]:
        @wraps(func)
        def wrapper(event: Mapping[str, Any], context: Any) -> JsonDict:
            request = PaginatedRequest(event=event, context=context, strategy=resolved)
            reply = PaginatedReply(
                request=request,
                strategy=resolved,
                cors_origin=cors_origin,
            )

            logger.debug(
                "Dispatching paginated request",
                extra={
                    "handler": func.__name__,
                    "request_id": request.request_id,
                    "strategy": type(resolved).__name__,
                },
            )

            result = func(request, reply)
            if result is not None:
                return result

            if reply.response is None:
                raise ReplyNotSentError(
                    message="Paginated handler finished without sending a reply",
                    details={"handler": func.__name__},
                )

            return reply.response

        return wrapper

    return decorator
