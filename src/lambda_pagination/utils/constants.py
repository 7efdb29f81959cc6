"""Global constants used throughout the pagination package.

This module centralizes the default pagination configuration, error codes,
environment variable names and API Gateway response settings so they can be
changed in one place.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_PAGINATION = "PAGINATION_ERROR"
ERROR_CODE_INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
ERROR_CODE_INVALID_STRATEGY = "INVALID_STRATEGY"
ERROR_CODE_INVALID_PAGE = "INVALID_PAGE"
ERROR_CODE_REPLY_NOT_SENT = "REPLY_NOT_SENT"

# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_LIMIT: Final[int] = 20
DEFAULT_MAX_LIMIT: Final[int] = 100
DEFAULT_OFFSET: Final[int] = 0
DEFAULT_LIMIT_PARAMETER: Final[str] = "limit"
DEFAULT_OFFSET_PARAMETER: Final[str] = "offset"

# Continuation links always use these keys, whatever the configured names.
LINK_LIMIT_KEY: Final[str] = "limit"
LINK_OFFSET_KEY: Final[str] = "offset"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"
QUERY_STRING_PARAMETERS_KEY = "queryStringParameters"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_PAGINATION_DEFAULT_LIMIT = "PAGINATION_DEFAULT_LIMIT"
ENV_PAGINATION_MAXIMUM_LIMIT = "PAGINATION_MAXIMUM_LIMIT"
ENV_PAGINATION_LIMIT_PARAMETER = "PAGINATION_LIMIT_PARAMETER"
ENV_PAGINATION_OFFSET_PARAMETER = "PAGINATION_OFFSET_PARAMETER"
