"""API key tools for Pocket ID MCP."""

from typing import Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import ApiKeyCreateRequest, Identifier
from ..utils.http import quote_segment
from .utils import pagination_params, require_id, tool_call, tool_output


async def api_key_list(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List API keys (paginated)."""
    with tool_call("api_key_list"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.api_keys.list(params)
    return tool_output(result)


async def api_key_create(name: str, expires_at: str, description: Optional[str] = None):
    """Create a new API key.

    The returned token is shown only once.

    :param name: Key name, at least three characters
    :param expires_at: Expiry as an ISO-8601 timestamp
    :param description: Optional description
    """
    with tool_call("api_key_create", "POST", "/api/api-keys"):
        body = ApiKeyCreateRequest(
            name=name, expires_at=expires_at, description=description
        ).to_body()
        result = await pocketid_api.api_keys.create(body)
    return tool_output(result, "API key created")


async def api_key_renew(key_id: Identifier):
    """Renew an API key."""
    path = f"/api/api-keys/{quote_segment(key_id)}/renew"
    with tool_call("api_key_renew", "POST", path, key_id):
        require_id(key_id, "key_id")
        result = await pocketid_api.api_keys.renew(key_id)
    return tool_output(result, "API key renewed")


async def api_key_delete(key_id: Identifier):
    """Delete an API key."""
    path = f"/api/api-keys/{quote_segment(key_id)}"
    with tool_call("api_key_delete", "DELETE", path, key_id):
        require_id(key_id, "key_id")
        await pocketid_api.api_keys.delete(key_id)
    return "API key deleted"


def register_api_key_tools(server: FastMCP) -> None:
    """Register API key tools.

    :param server: FastMCP server instance.
    """
    server.tool(name="api_key_list", description="List API keys (paginated)")(
        api_key_list
    )
    server.tool(name="api_key_create", description="Create a new API key")(
        api_key_create
    )
    server.tool(name="api_key_renew", description="Renew an API key")(api_key_renew)
    server.tool(name="api_key_delete", description="Delete an API key")(
        api_key_delete
    )
