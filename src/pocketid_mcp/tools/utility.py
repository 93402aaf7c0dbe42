"""Utility tools for Pocket ID MCP: health and version."""

from fastmcp import FastMCP

from ..api import pocketid_api
from .utils import tool_call, tool_output


async def health_check():
    """Check Pocket ID health.

    The health endpoint body is returned as Pocket ID sends it, JSON or
    plain text.
    """
    with tool_call("health_check"):
        result = await pocketid_api.utility.health_check()
    return tool_output(result, "Healthy")


async def version_latest():
    """Get the latest available Pocket ID version."""
    with tool_call("version_latest"):
        result = await pocketid_api.utility.latest_version()
    return tool_output(result)


def register_utility_tools(server: FastMCP) -> None:
    """Register utility tools.

    :param server: FastMCP server instance.
    """
    server.tool(name="health_check", description="Check Pocket ID health")(
        health_check
    )
    server.tool(
        name="version_latest",
        description="Get the latest available Pocket ID version",
    )(version_latest)
