"""Interfaces shared by pagination strategies and their hosts."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

QueryParams = Mapping[str, Any]


class PaginatedRequestProtocol(Protocol):
    """Request side of a host: exposes the raw query parameters."""

    @property
    def query(self) -> QueryParams: ...


class PaginationReply(Protocol):
    """Reply side of a host: can send a JSON-shaped body to the client."""

    @property
    def request(self) -> PaginatedRequestProtocol: ...

    def send(self, body: dict[str, Any]) -> Any: ...


@runtime_checkable
class PaginationStrategy(Protocol):
    """A pluggable pagination strategy.

    ``parse_pagination`` turns the query of an incoming request into
    whatever parameters the strategy needs. ``send_with_pagination`` wraps
    a page of results into the strategy's envelope and sends it through
    the reply.
    """

    def parse_pagination(self, query: QueryParams | None) -> Any: ...

    def send_with_pagination(self, reply: PaginationReply, page: Any) -> None: ...
