"""HTTP utilities public API (barrel module).

This package provides:
- Shared HTTP client manager
- Availability gate for the Pocket ID health check
- URL and pagination query builders
- Response classification and error normalization

Recommended import pattern for consumers:
    from pocketid_mcp.utils.http import AvailabilityGate, build_url, ApiResult

This keeps call sites stable even if internal modules are reorganized.
"""

from .availability import (
    API_KEY_HEADER,
    HEALTH_PATH,
    HEALTH_TIMEOUT_SECONDS,
    AvailabilityGate,
    AvailabilityState,
)
from .client_manager import HTTPClientManager, get_http_client, http_client_manager
from .request import (
    PaginationParams,
    build_pagination_query,
    build_url,
    quote_segment,
)
from .response import (
    ApiResult,
    ResponseKind,
    classify_response,
    normalize_error,
)

__all__ = [
    "API_KEY_HEADER",
    "HEALTH_PATH",
    "HEALTH_TIMEOUT_SECONDS",
    "AvailabilityGate",
    "AvailabilityState",
    "HTTPClientManager",
    "http_client_manager",
    "get_http_client",
    "PaginationParams",
    "build_pagination_query",
    "build_url",
    "quote_segment",
    "ApiResult",
    "ResponseKind",
    "classify_response",
    "normalize_error",
]
