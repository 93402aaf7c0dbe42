"""Availability gate for the Pocket ID instance.

Before any request is attempted, the gate verifies that the endpoint is
configured and that Pocket ID answers its health check. The outcome is
memoized:

- the first caller starts a single check task
- concurrent callers attach to that same task instead of probing again
- success is cached for the lifetime of the gate
- failure resets the gate so the very next call checks again

The check task is shared through ``asyncio.shield`` so a caller that is
cancelled while waiting does not cancel the check for everyone else.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

import httpx

from ...config.settings import EndpointConfig
from ...exceptions import ConfigurationError, HealthCheckError
from .client_manager import get_http_client

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-KEY"
HEALTH_PATH = "/healthz"
HEALTH_TIMEOUT_SECONDS = 5.0

ClientProvider = Callable[[], Awaitable[httpx.AsyncClient]]


class AvailabilityState(str, Enum):
    """Lifecycle of the availability check."""

    UNCHECKED = "unchecked"
    CHECKING = "checking"
    AVAILABLE = "available"


class AvailabilityGate:
    """De-duplicating, memoizing health check.

    :param endpoint: Upstream endpoint to check
    :type endpoint: EndpointConfig
    :param client_provider: Coroutine factory returning the HTTP client
        used for the health check; defaults to the shared client
    :type client_provider: Optional[ClientProvider]
    :param timeout: Health check deadline in seconds
    :type timeout: float
    """

    def __init__(
        self,
        endpoint: EndpointConfig,
        client_provider: Optional[ClientProvider] = None,
        timeout: float = HEALTH_TIMEOUT_SECONDS,
    ):
        self._endpoint = endpoint
        self._client_provider = client_provider or get_http_client
        self._timeout = timeout
        self._state = AvailabilityState.UNCHECKED
        self._pending: Optional[asyncio.Task] = None

    @property
    def state(self) -> AvailabilityState:
        return self._state

    async def ensure_available(self) -> None:
        """Wait until Pocket ID is known to be available.

        :raises ConfigurationError: If the base URL or API key is missing
        :raises HealthCheckError: If the health check fails or times out
        """
        if self._state is AvailabilityState.AVAILABLE:
            return

        if self._pending is None:
            self._state = AvailabilityState.CHECKING
            self._pending = asyncio.ensure_future(self._run_check())
            # Retrieve the outcome even if every waiter was cancelled
            self._pending.add_done_callback(_consume_outcome)

        await asyncio.shield(self._pending)

    def reset(self) -> None:
        """Forget any cached outcome and return to ``UNCHECKED``."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
        self._state = AvailabilityState.UNCHECKED

    async def _run_check(self) -> None:
        task = asyncio.current_task()
        try:
            await self._check_health()
        except BaseException:
            # Cleared before any waiter sees the error
            if self._pending is task:
                self._state = AvailabilityState.UNCHECKED
                self._pending = None
            raise
        if self._pending is task:
            self._state = AvailabilityState.AVAILABLE
            self._pending = None
        logger.info("Pocket ID is available at %s", self._endpoint.base_url)

    async def _check_health(self) -> None:
        base_url = self._endpoint.base_url
        api_key = self._endpoint.api_key
        if not base_url:
            raise ConfigurationError(
                "POCKETID_URL environment variable is not set", setting="POCKETID_URL"
            )
        if not api_key:
            raise ConfigurationError(
                "POCKETID_API_KEY environment variable is not set",
                setting="POCKETID_API_KEY",
            )

        client = await self._client_provider()
        logger.debug("Probing Pocket ID health at %s%s", base_url, HEALTH_PATH)
        try:
            response = await asyncio.wait_for(
                client.get(
                    f"{base_url}{HEALTH_PATH}", headers={API_KEY_HEADER: api_key}
                ),
                timeout=self._timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise HealthCheckError(
                f"Pocket ID health check timed out after {self._timeout:g}s"
            ) from e
        except httpx.HTTPError as e:
            raise HealthCheckError(f"Pocket ID health check failed: {e}") from e

        # The body may be plain text or JSON depending on the deployment;
        # only the status decides.
        if not response.is_success:
            raise HealthCheckError(
                f"Pocket ID health check failed ({response.status_code})",
                status_code=response.status_code,
            )


def _consume_outcome(task: asyncio.Task) -> None:
    if not task.cancelled():
        task.exception()
