"""HTTP access layer for the Pocket ID API.

Every tool call reaches Pocket ID through :class:`PocketIdClient`. A
request goes through the same steps every time:

1. The availability gate confirms the instance is configured and healthy
2. The URL is built from the base URL, the path and the query
3. One exchange runs under its own deadline with the ``X-API-KEY`` header
4. The response is classified as empty, JSON or text, or turned into a
   :class:`~pocketid_mcp.exceptions.PocketIdError`

The module-level verbs (:func:`get`, :func:`get_list`, :func:`post`,
:func:`put`, :func:`delete`, :func:`put_file`) forward to a process-wide
default client built from the settings.

Examples:
    >>> result = await get_list("/api/users", PaginationParams(page=1, limit=20))
    >>> result.data["pagination"]["totalItems"]
"""

import asyncio
import base64
import binascii
import logging
from typing import Any, Mapping, Optional, Union

import httpx

from ..config.settings import EndpointConfig, get_settings
from ..exceptions import PayloadDecodeError, RequestTimeoutError
from ..utils.http import (
    API_KEY_HEADER,
    ApiResult,
    AvailabilityGate,
    PaginationParams,
    build_pagination_query,
    build_url,
    classify_response,
    get_http_client,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_MIME_TYPE = "application/octet-stream"
UPLOAD_FIELD_NAME = "file"
UPLOAD_FILENAME = "upload"

Pagination = Optional[Union[PaginationParams, Mapping[str, Any]]]


def decode_base64_payload(data: str) -> bytes:
    """Decode a base64 upload payload.

    Whitespace is ignored; any other character outside the base64
    alphabet, or bad padding, is rejected. An empty payload is rejected
    too, since it would upload a zero-byte file.

    :param data: Base64 text
    :type data: str
    :return: Decoded bytes
    :rtype: bytes
    :raises PayloadDecodeError: If the payload is empty or not valid base64
    """
    try:
        payload = base64.b64decode("".join(data.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise PayloadDecodeError(f"Invalid base64 payload: {e}") from e
    if not payload:
        raise PayloadDecodeError("Invalid base64 payload: empty")
    return payload


class PocketIdClient:
    """Client for the Pocket ID administrative API.

    :param endpoint: Base URL and API key
    :type endpoint: EndpointConfig
    :param http_client: Optional HTTP client; the shared client from the
        client manager is used when omitted
    :type http_client: Optional[httpx.AsyncClient]
    :param gate: Optional availability gate; one probing ``endpoint`` is
        created when omitted
    :type gate: Optional[AvailabilityGate]
    :param default_timeout_ms: Deadline applied when a call passes none
    :type default_timeout_ms: float
    """

    def __init__(
        self,
        endpoint: EndpointConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        gate: Optional[AvailabilityGate] = None,
        default_timeout_ms: float = DEFAULT_TIMEOUT_MS,
    ):
        self.endpoint = endpoint
        self._http_client = http_client
        self.gate = gate or AvailabilityGate(
            endpoint, client_provider=self._get_http_client
        )
        self.default_timeout_ms = default_timeout_ms

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return await get_http_client()
        return self._http_client

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        timeout_ms: Optional[float] = None,
    ) -> ApiResult:
        """Perform one JSON exchange with Pocket ID.

        :param method: HTTP method
        :type method: str
        :param path: Path relative to the base URL, with leading slash
        :type path: str
        :param body: Optional JSON-serializable body; ``None`` sends no body
        :type body: Any
        :param query: Optional query parameters
        :type query: Optional[Mapping[str, Any]]
        :param timeout_ms: Optional deadline in milliseconds
        :type timeout_ms: Optional[float]
        :return: Tagged response
        :rtype: ApiResult
        :raises ConfigurationError: If the endpoint is not configured
        :raises HealthCheckError: If Pocket ID is not available
        :raises PocketIdError: If Pocket ID answers with a non-2xx status
        :raises RequestTimeoutError: If the deadline elapses
        """
        await self.gate.ensure_available()

        url = build_url(self.endpoint.base_url, path, query)
        headers = {API_KEY_HEADER: self.endpoint.api_key}
        request_kwargs: dict = {"headers": headers}
        if body is not None:
            headers["Content-Type"] = "application/json"
            request_kwargs["json"] = body

        logger.debug(
            "HTTP request %s %s", method, path, extra={"method": method, "path": path}
        )
        return await self._exchange(method, path, url, timeout_ms, **request_kwargs)

    async def put_file(
        self,
        path: str,
        base64_data: str,
        mime_type: Optional[str] = DEFAULT_MIME_TYPE,
        timeout_ms: Optional[float] = None,
    ) -> ApiResult:
        """Upload a base64-encoded file as multipart form data.

        The payload is decoded before anything touches the network, so a
        malformed or empty payload never triggers a request or a health
        check.

        :param path: Upload path relative to the base URL
        :type path: str
        :param base64_data: File content, base64-encoded
        :type base64_data: str
        :param mime_type: Content type of the file part
        :type mime_type: Optional[str]
        :param timeout_ms: Optional deadline in milliseconds
        :type timeout_ms: Optional[float]
        :return: Tagged response
        :rtype: ApiResult
        :raises PayloadDecodeError: If ``base64_data`` is empty or not valid
            base64
        """
        payload = decode_base64_payload(base64_data)

        await self.gate.ensure_available()

        url = build_url(self.endpoint.base_url, path)
        files = {
            UPLOAD_FIELD_NAME: (UPLOAD_FILENAME, payload, mime_type or DEFAULT_MIME_TYPE)
        }

        logger.debug(
            "HTTP file upload PUT %s", path, extra={"method": "PUT", "path": path}
        )
        # Content-Type with the multipart boundary is set by httpx
        return await self._exchange(
            "PUT",
            path,
            url,
            timeout_ms,
            headers={API_KEY_HEADER: self.endpoint.api_key},
            files=files,
        )

    async def _exchange(
        self,
        method: str,
        path: str,
        url: str,
        timeout_ms: Optional[float],
        **request_kwargs: Any,
    ) -> ApiResult:
        deadline_ms = timeout_ms if timeout_ms is not None else self.default_timeout_ms
        client = await self._get_http_client()
        try:
            # Cancelling the request coroutine aborts its connection only
            response = await asyncio.wait_for(
                client.request(method, url, **request_kwargs),
                timeout=deadline_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning("%s %s timed out after %g ms", method, path, deadline_ms)
            raise RequestTimeoutError(method, path, deadline_ms) from e

        return classify_response(response, method, path)

    async def get(
        self, path: str, query: Optional[Mapping[str, Any]] = None
    ) -> ApiResult:
        return await self.request("GET", path, query=query)

    async def get_list(self, path: str, pagination: Pagination = None) -> ApiResult:
        return await self.request(
            "GET", path, query=build_pagination_query(pagination)
        )

    async def post(self, path: str, body: Any = None) -> ApiResult:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> ApiResult:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> ApiResult:
        return await self.request("DELETE", path)


_default_client: Optional[PocketIdClient] = None


def get_pocketid_client() -> PocketIdClient:
    """Return the process-wide client, creating it from settings.

    :return: Default Pocket ID client
    :rtype: PocketIdClient
    """
    global _default_client
    if _default_client is None:
        settings = get_settings()
        _default_client = PocketIdClient(
            EndpointConfig.from_settings(settings),
            default_timeout_ms=settings.request_timeout_ms,
        )
    return _default_client


def set_pocketid_client(client: Optional[PocketIdClient]) -> None:
    """Replace the process-wide client (``None`` resets it)."""
    global _default_client
    _default_client = client


def reset_pocketid_client() -> None:
    """Drop the process-wide client and its cached availability."""
    set_pocketid_client(None)


async def get(path: str, query: Optional[Mapping[str, Any]] = None) -> ApiResult:
    """GET ``path`` with an optional plain query."""
    return await get_pocketid_client().get(path, query)


async def get_list(path: str, pagination: Pagination = None) -> ApiResult:
    """GET a paginated collection."""
    return await get_pocketid_client().get_list(path, pagination)


async def post(path: str, body: Any = None) -> ApiResult:
    """POST an optional JSON body."""
    return await get_pocketid_client().post(path, body)


async def put(path: str, body: Any = None) -> ApiResult:
    """PUT an optional JSON body."""
    return await get_pocketid_client().put(path, body)


async def delete(path: str) -> ApiResult:
    """DELETE ``path``."""
    return await get_pocketid_client().delete(path)


async def put_file(
    path: str, base64_data: str, mime_type: Optional[str] = DEFAULT_MIME_TYPE
) -> ApiResult:
    """PUT a base64-encoded file as multipart form data."""
    return await get_pocketid_client().put_file(path, base64_data, mime_type)
