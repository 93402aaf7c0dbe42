"""OIDC discovery tools for Pocket ID MCP."""

from fastmcp import FastMCP

from ..api import pocketid_api
from .utils import tool_call, tool_output


async def oidc_discovery():
    """Get the OpenID Connect discovery document."""
    with tool_call("oidc_discovery"):
        result = await pocketid_api.oidc_discovery.configuration()
    return tool_output(result)


async def oidc_jwks():
    """Get the JSON Web Key Set used to sign tokens."""
    with tool_call("oidc_jwks"):
        result = await pocketid_api.oidc_discovery.jwks()
    return tool_output(result)


def register_oidc_discovery_tools(server: FastMCP) -> None:
    """Register OIDC discovery tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="oidc_discovery",
        description="Get the OpenID Connect discovery document",
    )(oidc_discovery)
    server.tool(name="oidc_jwks", description="Get the JSON Web Key Set")(oidc_jwks)
