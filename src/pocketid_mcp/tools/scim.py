"""SCIM service provider tools for Pocket ID MCP."""

from typing import Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import (
    Identifier,
    ScimServiceProviderCreateRequest,
    ScimServiceProviderUpdateRequest,
)
from ..utils.http import quote_segment
from .utils import require_id, tool_call, tool_output

SCIM_PATH = "/api/scim/service-provider"


async def scim_provider_create(endpoint: str, oidc_client_id: Identifier, token: str):
    """Create a SCIM service provider for an OIDC client."""
    with tool_call("scim_provider_create", "POST", SCIM_PATH):
        body = ScimServiceProviderCreateRequest(
            endpoint=endpoint, oidc_client_id=oidc_client_id, token=token
        ).to_body()
        result = await pocketid_api.scim.create_provider(body)
    return tool_output(result, "SCIM provider created")


async def scim_provider_update(
    provider_id: Identifier,
    endpoint: Optional[str] = None,
    oidc_client_id: Optional[str] = None,
    token: Optional[str] = None,
):
    """Update a SCIM service provider."""
    path = f"{SCIM_PATH}/{quote_segment(provider_id)}"
    with tool_call("scim_provider_update", "PUT", path, provider_id):
        require_id(provider_id, "provider_id")
        body = ScimServiceProviderUpdateRequest(
            endpoint=endpoint, oidc_client_id=oidc_client_id, token=token
        ).to_body()
        result = await pocketid_api.scim.update_provider(provider_id, body)
    return tool_output(result, "SCIM provider updated")


async def scim_provider_delete(provider_id: Identifier):
    """Delete a SCIM service provider."""
    path = f"{SCIM_PATH}/{quote_segment(provider_id)}"
    with tool_call("scim_provider_delete", "DELETE", path, provider_id):
        require_id(provider_id, "provider_id")
        await pocketid_api.scim.delete_provider(provider_id)
    return "SCIM provider deleted"


async def scim_provider_sync(provider_id: Identifier):
    """Trigger a sync for a SCIM service provider."""
    path = f"{SCIM_PATH}/{quote_segment(provider_id)}/sync"
    with tool_call("scim_provider_sync", "POST", path, provider_id):
        require_id(provider_id, "provider_id")
        await pocketid_api.scim.sync_provider(provider_id)
    return "SCIM sync triggered"


def register_scim_tools(server: FastMCP) -> None:
    """Register SCIM service provider tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="scim_provider_create", description="Create a SCIM service provider"
    )(scim_provider_create)
    server.tool(
        name="scim_provider_update", description="Update a SCIM service provider"
    )(scim_provider_update)
    server.tool(
        name="scim_provider_delete", description="Delete a SCIM service provider"
    )(scim_provider_delete)
    server.tool(
        name="scim_provider_sync", description="Trigger a SCIM provider sync"
    )(scim_provider_sync)
