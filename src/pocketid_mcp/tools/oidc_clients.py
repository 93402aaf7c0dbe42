"""OIDC client tools for Pocket ID MCP.

This module provides tools for managing OIDC clients: CRUD, client
secrets, allowed user groups, claim previews and per-user
authorizations.
"""

from typing import List, Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import Identifier, OidcClientCreateRequest, OidcClientUpdateRequest
from ..utils.http import quote_segment
from .utils import pagination_params, require_id, require_ids, tool_call, tool_output


def _client_path(client_id: str, suffix: str = "") -> str:
    return f"/api/oidc/clients/{quote_segment(client_id)}{suffix}"


async def oidc_client_list(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List OIDC clients (paginated)."""
    with tool_call("oidc_client_list"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.oidc_clients.list(params)
    return tool_output(result)


async def oidc_client_get(client_id: Identifier):
    """Get an OIDC client by ID."""
    with tool_call("oidc_client_get"):
        require_id(client_id, "client_id")
        result = await pocketid_api.oidc_clients.get(client_id)
    return tool_output(result)


async def oidc_client_create(
    name: str,
    callback_urls: Optional[List[str]] = None,
    logout_urls: Optional[List[str]] = None,
    is_public: Optional[bool] = None,
    pkce_enabled: Optional[bool] = None,
    has_logo: Optional[bool] = None,
):
    """Create a new OIDC client."""
    with tool_call("oidc_client_create", "POST", "/api/oidc/clients"):
        body = OidcClientCreateRequest(
            name=name,
            callback_urls=callback_urls,
            logout_urls=logout_urls,
            is_public=is_public,
            pkce_enabled=pkce_enabled,
            has_logo=has_logo,
        ).to_body()
        result = await pocketid_api.oidc_clients.create(body)
    return tool_output(result, "OIDC client created")


async def oidc_client_update(
    client_id: Identifier,
    name: Optional[str] = None,
    callback_urls: Optional[List[str]] = None,
    logout_urls: Optional[List[str]] = None,
    is_public: Optional[bool] = None,
    pkce_enabled: Optional[bool] = None,
    has_logo: Optional[bool] = None,
):
    """Update an OIDC client."""
    path = _client_path(client_id)
    with tool_call("oidc_client_update", "PUT", path, client_id):
        require_id(client_id, "client_id")
        body = OidcClientUpdateRequest(
            name=name,
            callback_urls=callback_urls,
            logout_urls=logout_urls,
            is_public=is_public,
            pkce_enabled=pkce_enabled,
            has_logo=has_logo,
        ).to_body()
        result = await pocketid_api.oidc_clients.update(client_id, body)
    return tool_output(result, "OIDC client updated")


async def oidc_client_delete(client_id: Identifier):
    """Delete an OIDC client."""
    path = _client_path(client_id)
    with tool_call("oidc_client_delete", "DELETE", path, client_id):
        require_id(client_id, "client_id")
        await pocketid_api.oidc_clients.delete(client_id)
    return "OIDC client deleted"


async def oidc_client_create_secret(client_id: Identifier):
    """Create a new secret for an OIDC client.

    The previous secret stops working immediately.
    """
    path = _client_path(client_id, "/secret")
    with tool_call("oidc_client_create_secret", "POST", path, client_id):
        require_id(client_id, "client_id")
        result = await pocketid_api.oidc_clients.create_secret(client_id)
    return tool_output(result)


async def oidc_client_update_allowed_groups(
    client_id: Identifier, user_group_ids: List[Identifier]
):
    """Replace the user groups allowed to use an OIDC client."""
    path = _client_path(client_id, "/allowed-user-groups")
    with tool_call("oidc_client_update_allowed_groups", "PUT", path, client_id):
        require_id(client_id, "client_id")
        group_ids = require_ids(user_group_ids, "user_group_ids")
        result = await pocketid_api.oidc_clients.update_allowed_groups(
            client_id, group_ids
        )
    return tool_output(result, "Allowed user groups updated")


async def oidc_client_preview_claims(client_id: Identifier, user_id: Identifier):
    """Preview the claims an OIDC client would receive for a user."""
    with tool_call("oidc_client_preview_claims"):
        require_id(client_id, "client_id")
        require_id(user_id, "user_id")
        result = await pocketid_api.oidc_clients.preview_for_user(client_id, user_id)
    return tool_output(result)


async def oidc_client_authorized_list(user_id: Identifier):
    """List the OIDC clients a user has authorized."""
    with tool_call("oidc_client_authorized_list"):
        require_id(user_id, "user_id")
        result = await pocketid_api.oidc_clients.list_authorized_for_user(user_id)
    return tool_output(result)


async def oidc_client_revoke_authorization(client_id: Identifier):
    """Revoke an OIDC client authorization for the current user."""
    path = f"/api/oidc/users/me/authorized-clients/{quote_segment(client_id)}"
    with tool_call("oidc_client_revoke_authorization", "DELETE", path, client_id):
        require_id(client_id, "client_id")
        await pocketid_api.oidc_clients.revoke_authorization_for_current_user(client_id)
    return "Authorization revoked"


def register_oidc_client_tools(server: FastMCP) -> None:
    """Register OIDC client tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="oidc_client_list", description="List OIDC clients (paginated)"
    )(oidc_client_list)
    server.tool(name="oidc_client_get", description="Get an OIDC client by ID")(
        oidc_client_get
    )
    server.tool(name="oidc_client_create", description="Create a new OIDC client")(
        oidc_client_create
    )
    server.tool(name="oidc_client_update", description="Update an OIDC client")(
        oidc_client_update
    )
    server.tool(name="oidc_client_delete", description="Delete an OIDC client")(
        oidc_client_delete
    )
    server.tool(
        name="oidc_client_create_secret",
        description="Create a new secret for an OIDC client",
    )(oidc_client_create_secret)
    server.tool(
        name="oidc_client_update_allowed_groups",
        description="Update allowed user groups for an OIDC client",
    )(oidc_client_update_allowed_groups)
    server.tool(
        name="oidc_client_preview_claims",
        description="Preview OIDC claims for a client and user",
    )(oidc_client_preview_claims)
    server.tool(
        name="oidc_client_authorized_list",
        description="List authorized OIDC clients for a user",
    )(oidc_client_authorized_list)
    server.tool(
        name="oidc_client_revoke_authorization",
        description="Revoke OIDC client authorization for the current user",
    )(oidc_client_revoke_authorization)
