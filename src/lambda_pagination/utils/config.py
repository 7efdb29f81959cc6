"""
Environment-driven pagination configuration.

Lambda functions configure their pagination bounds through environment
variables so the same handler code can be deployed with different limits.
"""

import os
from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from lambda_pagination.models.errors import ConfigurationError
from lambda_pagination.models.pagination import StrategyConfig
from lambda_pagination.utils.constants import (
    ENV_PAGINATION_DEFAULT_LIMIT,
    ENV_PAGINATION_LIMIT_PARAMETER,
    ENV_PAGINATION_MAXIMUM_LIMIT,
    ENV_PAGINATION_OFFSET_PARAMETER,
)

logger = Logger(UTC=True)


def _read_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return None

    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            message=f"Invalid integer value for {name}",
            details={"variable": name, "value": raw},
        ) from exc


def _read_str(environ: Mapping[str, str], name: str) -> str | None:
    raw = (environ.get(name) or "").strip()
    return raw or None


def load_strategy_config(environ: Mapping[str, str] | None = None) -> StrategyConfig:
    """Build a strategy configuration from environment variables.

    Unset or empty variables fall back to the built-in defaults.

    Args:
        environ: Variables to read; defaults to ``os.environ``

    Returns:
        Frozen strategy configuration

    Raises:
        ConfigurationError: If a limit variable is not an integer
    """
    env = os.environ if environ is None else environ

    options: dict[str, Any] = {
        "default_limit": _read_int(env, ENV_PAGINATION_DEFAULT_LIMIT),
        "maximum_limit": _read_int(env, ENV_PAGINATION_MAXIMUM_LIMIT),
        "limit_parameter": _read_str(env, ENV_PAGINATION_LIMIT_PARAMETER),
        "offset_parameter": _read_str(env, ENV_PAGINATION_OFFSET_PARAMETER),
    }
    resolved = {key: value for key, value in options.items() if value is not None}

    logger.debug(
        "Loaded pagination configuration from environment",
        extra={"overrides": sorted(resolved)},
    )

    return StrategyConfig(**resolved)
