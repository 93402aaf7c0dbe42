#!/usr/bin/env python3
"""Pocket ID MCP Server.

Entry point for the ``pocketid-mcp`` command. Builds the FastMCP server
with every Pocket ID tool and runs it over stdio or HTTP.
"""

import argparse
import asyncio
import atexit
import logging
import signal
from typing import Any

from dotenv import load_dotenv

from ..config.settings import get_settings
from ..utils.http import http_client_manager
from ..utils.logging_setup import setup_logging
from .server_builder import ServerBuilder

logger = logging.getLogger(__name__)


async def create_pocketid_server() -> Any:
    """Create and configure the Pocket ID MCP server.

    :return: Configured FastMCP server instance
    :raises Exception: If server initialization fails

    Examples
    --------
    .. code-block:: python

        server = await create_pocketid_server()
        server.run()
    """
    builder = ServerBuilder()
    server = await builder.build()

    logger.info("MCP server setup complete")
    return server


_cleanup_task = None
_cleanup_done = False


async def cleanup_resources_async() -> None:
    """Close the shared HTTP clients.

    Runs at most once; errors are logged and not raised.
    """
    global _cleanup_done
    if _cleanup_done:
        return

    logger.info("Shutting down server...")
    try:
        await http_client_manager.close_all()
        logger.info("HTTP clients closed")
    except Exception as e:
        logger.error("Error closing http clients: %s", e)

    _cleanup_done = True


def cleanup_sync() -> None:
    """Synchronously clean up server resources.

    Schedules the cleanup on the running event loop when there is one,
    otherwise runs it on a fresh loop.
    """
    global _cleanup_task

    if _cleanup_done:
        return

    try:
        loop = asyncio.get_running_loop()
        if not loop.is_closed() and not _cleanup_task:
            _cleanup_task = loop.create_task(cleanup_resources_async())
            logger.debug("Cleanup scheduled in running event loop")
        return
    except RuntimeError:
        # No running loop
        pass

    try:
        asyncio.run(cleanup_resources_async())
        logger.info("Cleanup complete via new event loop")
    except Exception as e:
        logger.debug("Could not perform sync cleanup: %s", e)


def main() -> None:
    """Run the Pocket ID MCP server.

    Parses command line arguments, initializes logging, creates the
    server, and starts it with the specified transport:

    - stdio: Standard input/output communication
    - http: HTTP-based communication
    - streamable-http: Streamable HTTP communication

    Examples
    --------
    .. code-block:: bash

        # Run with stdio transport
        pocketid-mcp

        # Run with HTTP transport
        pocketid-mcp --transport http --port 9080
    """
    # Load environment variables from .env file if it exists
    load_dotenv()

    settings = get_settings()
    setup_logging(settings)
    logger.debug("Environment variables loaded")

    parser = argparse.ArgumentParser(description="Pocket ID MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "streamable-http"],
        default="stdio",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=9080)
    args = parser.parse_args()

    atexit.register(cleanup_sync)
    signal.signal(signal.SIGTERM, lambda *_: cleanup_sync())

    logger.info("Creating Pocket ID MCP server...")
    mcp = asyncio.run(create_pocketid_server())
    logger.info("Server initialization complete")

    try:
        if args.transport in ("http", "streamable-http"):
            logger.info(
                "Starting %s server on %s:%d", args.transport, args.host, args.port
            )
            mcp.run(transport=args.transport, host=args.host, port=args.port)
        else:
            logger.info("Running in stdio mode")
            mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        cleanup_sync()


if __name__ == "__main__":
    main()
