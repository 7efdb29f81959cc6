"""
Unit tests for the limit-offset pagination strategy.
"""

from typing import Any

import pytest
from pydantic import ValidationError

from lambda_pagination.models.errors import InvalidPageError
from lambda_pagination.models.pagination import (
    Page,
    PaginationEnvelope,
    PaginationParams,
    StrategyConfig,
)
from lambda_pagination.strategies.base import PaginationStrategy
from lambda_pagination.strategies.limit_offset import (
    DEFAULT_LIMIT,
    DEFAULT_LIMIT_PARAMETER,
    DEFAULT_MAX_LIMIT,
    DEFAULT_OFFSET_PARAMETER,
    LimitOffsetStrategy,
    build_envelope,
    create_strategy,
    create_strategy_from_env,
    parse_pagination,
)


class FakeRequest:
    def __init__(self, query: dict[str, Any] | None) -> None:
        self.query = query


class FakeReply:
    def __init__(self, query: dict[str, Any] | None = None) -> None:
        self.request = FakeRequest(query)
        self.sent: list[dict[str, Any]] = []

    def send(self, body: dict[str, Any]) -> None:
        self.sent.append(body)


class TestDefaults:
    def test_exported_defaults(self) -> None:
        assert DEFAULT_LIMIT == 20
        assert DEFAULT_MAX_LIMIT == 100
        assert DEFAULT_LIMIT_PARAMETER == "limit"
        assert DEFAULT_OFFSET_PARAMETER == "offset"

    def test_default_config(self, default_strategy: LimitOffsetStrategy) -> None:
        assert default_strategy.config == StrategyConfig(
            limit_parameter="limit",
            offset_parameter="offset",
            default_limit=20,
            maximum_limit=100,
        )

    def test_strategy_satisfies_protocol(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        assert isinstance(default_strategy, PaginationStrategy)


class TestParsePagination:
    @pytest.mark.parametrize(
        "query",
        [
            {},
            None,
            {"limit": ""},
            {"limit": "abc"},
            {"limit": "  "},
            {"limit": "x10"},
            {"limit": None},
            {"limit": []},
        ],
    )
    def test_missing_or_non_numeric_limit_uses_default(
        self,
        default_strategy: LimitOffsetStrategy,
        query: dict[str, Any] | None,
    ) -> None:
        assert default_strategy.parse_pagination(query).limit == DEFAULT_LIMIT

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("0", 0),
            ("1", 1),
            ("55", 55),
            ("100", 100),
            ("101", 100),
            ("1000", 100),
            (55, 55),
        ],
    )
    def test_numeric_limit_is_capped_at_maximum(
        self,
        default_strategy: LimitOffsetStrategy,
        raw: Any,
        expected: int,
    ) -> None:
        assert default_strategy.parse_pagination({"limit": raw}).limit == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("15abc", 15),
            ("  30", 30),
            ("12.9", 12),
            ("+7", 7),
            ("1e3", 1),
            ("0x10", 0),
        ],
    )
    def test_limit_uses_leading_integer_prefix(
        self,
        default_strategy: LimitOffsetStrategy,
        raw: str,
        expected: int,
    ) -> None:
        assert default_strategy.parse_pagination({"limit": raw}).limit == expected

    def test_negative_limit_is_not_clamped_below(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        assert default_strategy.parse_pagination({"limit": "-5"}).limit == -5

    @pytest.mark.parametrize("query", [{}, {"offset": ""}, {"offset": "abc"}])
    def test_missing_or_non_numeric_offset_is_zero(
        self,
        default_strategy: LimitOffsetStrategy,
        query: dict[str, Any],
    ) -> None:
        assert default_strategy.parse_pagination(query).offset == 0

    @pytest.mark.parametrize(
        "raw,expected",
        [("0", 0), ("10", 10), ("5000", 5000), ("20px", 20), ("-3", -3)],
    )
    def test_numeric_offset_is_used_as_is(
        self,
        default_strategy: LimitOffsetStrategy,
        raw: str,
        expected: int,
    ) -> None:
        assert default_strategy.parse_pagination({"offset": raw}).offset == expected

    def test_repeated_query_key_uses_first_value(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        params = default_strategy.parse_pagination({"limit": ["5", "50"]})

        assert params.limit == 5

    def test_returns_pagination_params(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        params = default_strategy.parse_pagination({"limit": "10", "offset": "30"})

        assert params == PaginationParams(limit=10, offset=30)

    def test_parse_is_idempotent(self, default_strategy: LimitOffsetStrategy) -> None:
        query = {"limit": "35", "offset": "70"}

        first = default_strategy.parse_pagination(query)
        second = default_strategy.parse_pagination(query)

        assert first == second
        assert query == {"limit": "35", "offset": "70"}

    def test_free_function_matches_method(self) -> None:
        config = StrategyConfig(default_limit=7)

        assert parse_pagination(config, {}) == LimitOffsetStrategy(config).parse_pagination({})

    def test_ignores_unrelated_parameters(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        params = default_strategy.parse_pagination({"page": "3", "size": "5"})

        assert params == PaginationParams(limit=20, offset=0)


class TestCreateStrategy:
    def test_custom_default_limit(self) -> None:
        strategy = create_strategy(default_limit=50)

        assert strategy.parse_pagination({}).limit == 50

    def test_custom_limit_parameter(self) -> None:
        strategy = create_strategy(limit_parameter="foo")

        assert strategy.parse_pagination({"foo": "55"}).limit == 55
        assert strategy.parse_pagination({"limit": "55"}).limit == DEFAULT_LIMIT

    def test_custom_offset_parameter(self) -> None:
        strategy = create_strategy(offset_parameter="foo")

        assert strategy.parse_pagination({"foo": "10"}).offset == 10
        assert strategy.parse_pagination({"offset": "10"}).offset == 0

    def test_custom_maximum_limit(self) -> None:
        strategy = create_strategy(maximum_limit=1000)

        assert strategy.parse_pagination({"limit": "1000"}).limit == 1000

    def test_accepts_camel_case_options(self) -> None:
        strategy = create_strategy(
            {
                "defaultLimit": 5,
                "maximumLimit": 10,
                "limitParameter": "size",
                "offsetParameter": "skip",
            }
        )

        assert strategy.config == StrategyConfig(
            default_limit=5,
            maximum_limit=10,
            limit_parameter="size",
            offset_parameter="skip",
        )

    def test_keyword_overrides_win_over_options(self) -> None:
        strategy = create_strategy({"defaultLimit": 5}, default_limit=8)

        assert strategy.config.default_limit == 8

    def test_none_options_take_defaults(self) -> None:
        strategy = create_strategy(default_limit=None, limit_parameter=None)

        assert strategy.config.default_limit == DEFAULT_LIMIT
        assert strategy.config.limit_parameter == DEFAULT_LIMIT_PARAMETER

    def test_accepts_existing_config(self) -> None:
        config = StrategyConfig(maximum_limit=30)

        strategy = create_strategy(config, default_limit=3)

        assert strategy.config.maximum_limit == 30
        assert strategy.config.default_limit == 3

    def test_negative_limits_are_not_rejected(self) -> None:
        strategy = create_strategy(default_limit=-1, maximum_limit=-10)

        assert strategy.parse_pagination({}).limit == -10

    def test_non_integer_limit_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            create_strategy(default_limit="many")

    def test_config_is_frozen(self, default_strategy: LimitOffsetStrategy) -> None:
        with pytest.raises(ValidationError):
            default_strategy.config.default_limit = 99  # type: ignore[misc]

    def test_from_env(self) -> None:
        strategy = create_strategy_from_env(
            {
                "PAGINATION_DEFAULT_LIMIT": "15",
                "PAGINATION_LIMIT_PARAMETER": "per_page",
            }
        )

        assert strategy.parse_pagination({}).limit == 15
        assert strategy.parse_pagination({"per_page": "40"}).limit == 40


class TestBuildEnvelope:
    def test_first_page_has_next_and_no_previous(
        self,
        default_strategy: LimitOffsetStrategy,
        number_sequence,
    ) -> None:
        items = number_sequence(100)

        envelope = default_strategy.build_envelope(
            {}, Page(count=len(items), items=items[0:20])
        )

        assert envelope == PaginationEnvelope(
            count=100,
            next="limit=20&offset=20",
            previous=None,
            results=items[0:20],
        )

    def test_previous_page_at_offset_equal_to_limit(
        self,
        default_strategy: LimitOffsetStrategy,
        number_sequence,
    ) -> None:
        items = number_sequence(100)

        envelope = default_strategy.build_envelope(
            {"offset": "20"}, Page(count=100, items=items[20:40])
        )

        assert envelope.previous == "limit=20&offset=0"
        assert envelope.next == "limit=20&offset=40"

    @pytest.mark.parametrize("count", [20, 10, 0])
    def test_no_next_when_limit_covers_count(
        self,
        default_strategy: LimitOffsetStrategy,
        count: int,
    ) -> None:
        envelope = default_strategy.build_envelope({}, Page(count=count, items=[]))

        assert envelope.next is None

    @pytest.mark.parametrize("offset", ["10", "20"])
    def test_no_next_when_offset_and_limit_reach_count(
        self,
        default_strategy: LimitOffsetStrategy,
        offset: str,
    ) -> None:
        envelope = default_strategy.build_envelope(
            {"offset": offset}, Page(count=30, items=[])
        )

        assert envelope.next is None

    def test_no_previous_when_offset_smaller_than_limit(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        envelope = default_strategy.build_envelope(
            {"offset": "10"}, Page(count=30, items=[])
        )

        assert envelope.previous is None

    def test_links_use_literal_keys_with_custom_parameters(self) -> None:
        strategy = create_strategy(limit_parameter="size", offset_parameter="skip")

        envelope = strategy.build_envelope(
            {"size": "5", "skip": "5"}, Page(count=50, items=[])
        )

        assert envelope.next == "limit=5&offset=10"
        assert envelope.previous == "limit=5&offset=0"

    def test_links_use_clamped_limit(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        envelope = default_strategy.build_envelope(
            {"limit": "500", "offset": "100"}, Page(count=1000, items=[])
        )

        assert envelope.next == "limit=100&offset=200"
        assert envelope.previous == "limit=100&offset=0"

    def test_accepts_count_and_page_mapping(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        envelope = default_strategy.build_envelope({}, {"count": 3, "page": [1, 2, 3]})

        assert envelope.results == [1, 2, 3]
        assert envelope.next is None

    def test_invalid_page_mapping_raises(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        with pytest.raises(InvalidPageError) as exc_info:
            default_strategy.build_envelope({}, {"page": [{"secret": "s3cr3t"}]})

        assert exc_info.value.details == {"fields": ["count"]}
        assert "s3cr3t" not in str(exc_info.value)

    def test_free_function_matches_method(self) -> None:
        config = StrategyConfig()
        page = Page(count=50, items=[])

        assert build_envelope(config, {"offset": "20"}, page) == (
            LimitOffsetStrategy(config).build_envelope({"offset": "20"}, page)
        )


class TestSendWithPagination:
    def test_sends_envelope_once(self, default_strategy: LimitOffsetStrategy) -> None:
        reply = FakeReply({"offset": "20"})

        result = default_strategy.send_with_pagination(
            reply, {"count": 100, "page": list(range(20, 40))}
        )

        assert result is None
        assert reply.sent == [
            {
                "count": 100,
                "next": "limit=20&offset=40",
                "previous": "limit=20&offset=0",
                "results": list(range(20, 40)),
            }
        ]

    def test_rederives_params_from_request_query(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        reply = FakeReply({"limit": "10"})

        default_strategy.send_with_pagination(reply, Page(count=100, items=[]))

        assert reply.sent[0]["next"] == "limit=10&offset=10"

    def test_reply_failure_propagates(
        self, default_strategy: LimitOffsetStrategy
    ) -> None:
        class BrokenReply(FakeReply):
            def send(self, body: dict[str, Any]) -> None:
                raise ConnectionError("socket closed")

        with pytest.raises(ConnectionError):
            default_strategy.send_with_pagination(
                BrokenReply(), Page(count=1, items=[1])
            )
