"""Response classification and error normalization.

Every Pocket ID exchange ends in one of three shapes:

- ``EMPTY`` for HTTP 204, whatever the declared content type
- ``JSON`` when the response declares a JSON content type
- ``TEXT`` for any other successful response

Non-2xx responses never produce a result; they become a
:class:`~pocketid_mcp.exceptions.PocketIdError` through
:func:`normalize_error`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from ...exceptions import PocketIdError

JSON_CONTENT_TYPE = "application/json"


class ResponseKind(str, Enum):
    """Shape of a successful Pocket ID response."""

    EMPTY = "empty"
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class ApiResult:
    """Tagged result of one Pocket ID exchange.

    :param kind: Shape of the response body
    :param data: ``None`` for EMPTY, the parsed value for JSON, the raw
        text for TEXT
    """

    kind: ResponseKind
    data: Any = None

    @classmethod
    def empty(cls) -> "ApiResult":
        return cls(ResponseKind.EMPTY)

    @classmethod
    def json(cls, value: Any) -> "ApiResult":
        return cls(ResponseKind.JSON, value)

    @classmethod
    def text(cls, value: str) -> "ApiResult":
        return cls(ResponseKind.TEXT, value)

    @property
    def is_empty(self) -> bool:
        return self.kind is ResponseKind.EMPTY


def normalize_error(status_code: int, method: str, path: str, body: str) -> PocketIdError:
    """Build the typed error for a non-success response.

    :param status_code: HTTP status code
    :param method: HTTP method of the request
    :param path: Request path relative to the base URL
    :param body: Raw response body
    :return: Error whose message lists method, path, status and body
    :rtype: PocketIdError
    """
    return PocketIdError(status_code, method, path, body)


def classify_response(response: httpx.Response, method: str, path: str) -> ApiResult:
    """Classify a fully read response.

    :param response: Response whose body has already been read
    :type response: httpx.Response
    :param method: HTTP method, used for error reporting
    :type method: str
    :param path: Request path, used for error reporting
    :type path: str
    :return: Tagged result
    :rtype: ApiResult
    :raises PocketIdError: If the status is not 2xx
    :raises json.JSONDecodeError: If a JSON content type carries malformed JSON
    """
    if not response.is_success:
        raise normalize_error(response.status_code, method, path, response.text)

    if response.status_code == 204:
        return ApiResult.empty()

    content_type = response.headers.get("content-type", "").lower()
    if JSON_CONTENT_TYPE in content_type:
        return ApiResult.json(response.json())

    return ApiResult.text(response.text)
