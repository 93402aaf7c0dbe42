"""Shared HTTP client manager and lifecycle management.

This module provides a singleton manager that owns the
``httpx.AsyncClient`` instances used to talk to Pocket ID. Clients are
cached per configuration so every request reuses the same transport and
its connection pool, and are closed together at shutdown.

Deadlines are not configured here: each exchange applies its own
deadline, so the transport timeout stays disabled by default.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class HTTPClientManager:
    """Manages shared HTTP clients.

    This singleton class caches clients based on their configuration to
    avoid creating duplicate clients with the same settings, and closes
    all of them in :meth:`close_all`.
    """

    _instance: Optional["HTTPClientManager"] = None

    def __new__(cls):
        """Ensure singleton pattern - only one instance exists.

        :return: The single instance of HTTPClientManager
        :rtype: HTTPClientManager
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, "_initialized"):
            self._clients: Dict[str, httpx.AsyncClient] = {}
            self._lock = asyncio.Lock()
            self._default_limits = httpx.Limits(
                max_keepalive_connections=10,
                max_connections=20,
                keepalive_expiry=30.0,
            )
            self._initialized = True
            self._is_closing = False

    async def get_client(
        self,
        timeout: Optional[httpx.Timeout] = None,
        limits: Optional[httpx.Limits] = None,
        **kwargs: Any,
    ) -> httpx.AsyncClient:
        """Get or create an HTTP client for the given configuration.

        :param timeout: Optional transport timeout; disabled when omitted
        :type timeout: Optional[httpx.Timeout]
        :param limits: Optional custom connection limits
        :type limits: Optional[httpx.Limits]
        :param **kwargs: Additional ``httpx.AsyncClient`` options
        :return: Configured HTTP client instance
        :rtype: httpx.AsyncClient
        """
        follow = kwargs.get("follow_redirects", True)
        t_key = (
            (timeout.connect, timeout.read, timeout.write, timeout.pool)
            if timeout
            else None
        )
        l_key = (
            (
                limits.max_keepalive_connections,
                limits.max_connections,
                limits.keepalive_expiry,
            )
            if limits
            else None
        )
        cache_key = str((t_key, l_key, follow))

        if cache_key not in self._clients:
            async with self._lock:
                if cache_key not in self._clients:
                    client_config: Dict[str, Any] = {
                        "timeout": timeout or httpx.Timeout(None),
                        "limits": limits or self._default_limits,
                        "follow_redirects": follow,
                        **kwargs,
                    }
                    self._clients[cache_key] = httpx.AsyncClient(**client_config)
                    logger.debug("Created new HTTP client for %s", cache_key)

        return self._clients[cache_key]

    async def close_all(self) -> None:
        """Close all managed HTTP clients.

        Errors while closing one client are logged and do not prevent the
        others from being closed.
        """
        if self._is_closing:
            logger.debug("Already closing HTTP clients, skipping duplicate call")
            return

        self._is_closing = True
        try:
            if not self._clients:
                logger.debug("No HTTP clients to close")
                return
            logger.info("Closing %d HTTP client(s)...", len(self._clients))
            for cache_key, client in list(self._clients.items()):
                try:
                    await client.aclose()
                    logger.debug("Closed managed HTTP client: %s", cache_key)
                except Exception as e:
                    logger.warning(
                        "Error closing managed HTTP client %s: %s", cache_key, e
                    )
            self._clients.clear()
            logger.info("All HTTP clients closed successfully")
        finally:
            self._is_closing = False


http_client_manager = HTTPClientManager()


async def get_http_client(**kwargs: Any) -> httpx.AsyncClient:
    """Get a shared HTTP client from the global manager.

    :param **kwargs: Client configuration parameters
    :return: Configured HTTP client instance
    :rtype: httpx.AsyncClient
    """
    return await http_client_manager.get_client(**kwargs)
