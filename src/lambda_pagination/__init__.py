"""Limit-offset pagination for AWS Lambda / API Gateway handlers."""

from lambda_pagination.models.pagination import (
    Page,
    PaginationEnvelope,
    PaginationParams,
    StrategyConfig,
)
from lambda_pagination.plugin import PaginatedReply, PaginatedRequest, with_pagination
from lambda_pagination.strategies.base import PaginationStrategy
from lambda_pagination.strategies.limit_offset import (
    LimitOffsetStrategy,
    create_strategy,
    create_strategy_from_env,
)

__version__ = "1.0.0"
__description__ = "Pluggable limit-offset pagination for API Gateway Lambda handlers"

__all__ = [
    "LimitOffsetStrategy",
    "Page",
    "PaginatedReply",
    "PaginatedRequest",
    "PaginationEnvelope",
    "PaginationParams",
    "PaginationStrategy",
    "StrategyConfig",
    "create_strategy",
    "create_strategy_from_env",
    "with_pagination",
]
