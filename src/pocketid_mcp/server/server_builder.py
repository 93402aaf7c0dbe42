"""Server builder module for creating configured MCP servers.

This module handles server initialization: creating the FastMCP
instance, wiring the Pocket ID client and registering the tools.
"""

import logging
from typing import Optional

from fastmcp import FastMCP

from .. import __version__
from ..api import PocketIdClient, get_pocketid_client
from ..config.settings import Settings, get_settings
from .builtin_tools import register_all_builtin_tools

logger = logging.getLogger(__name__)


class ServerBuilder:
    """Builder class for creating configured MCP servers.

    This class encapsulates the server setup process, making it easier
    to test and maintain.

    :param settings: Settings to build from, defaults to the cached ones
    :type settings: Optional[Settings]
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the server builder."""
        self.settings = settings or get_settings()
        self.server: Optional[FastMCP] = None
        self.client: Optional[PocketIdClient] = None

    async def build(self) -> FastMCP:
        """Build and configure the MCP server.

        :return: Configured FastMCP server instance
        :rtype: FastMCP
        """
        # Create the main server
        self.server = await self._create_main_server()

        # Setup Pocket ID client
        self.client = await self._setup_pocketid_client()

        # Setup built-in tools
        await self._setup_builtin_tools()

        return self.server

    async def _create_main_server(self) -> FastMCP:
        """Create the main FastMCP server instance.

        :return: Main server instance
        :rtype: FastMCP
        """
        server = FastMCP(self.settings.mcp_server_name, version=__version__)
        logger.info(
            "Created MCP server %s %s", self.settings.mcp_server_name, __version__
        )
        return server

    async def _setup_pocketid_client(self) -> PocketIdClient:
        """Resolve the Pocket ID client used by the tools.

        The endpoint is not contacted here; the first tool call runs the
        health check.

        :return: Shared Pocket ID client
        :rtype: PocketIdClient
        """
        client = get_pocketid_client()
        if not client.endpoint.base_url or not client.endpoint.api_key:
            logger.warning(
                "POCKETID_URL or POCKETID_API_KEY is not set; tool calls will fail"
            )
        else:
            logger.info("Using Pocket ID at %s", client.endpoint.base_url)
        return client

    async def _setup_builtin_tools(self):
        """Setup built-in tools."""
        await register_all_builtin_tools(self.server)
