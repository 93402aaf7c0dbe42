"""User group tools for Pocket ID MCP.

This module provides tools for managing user groups, their members and
the OIDC clients a group is allowed to use.
"""

from typing import List, Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import Identifier, UserGroupCreateRequest, UserGroupUpdateRequest
from ..utils.http import quote_segment
from .utils import pagination_params, require_id, require_ids, tool_call, tool_output


def _group_path(group_id: str, suffix: str = "") -> str:
    return f"/api/user-groups/{quote_segment(group_id)}{suffix}"


async def user_group_list(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List user groups (paginated)."""
    with tool_call("user_group_list"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.user_groups.list(params)
    return tool_output(result)


async def user_group_get(group_id: Identifier):
    """Get a user group by ID."""
    with tool_call("user_group_get"):
        require_id(group_id, "group_id")
        result = await pocketid_api.user_groups.get(group_id)
    return tool_output(result)


async def user_group_create(friendly_name: str, name: str):
    """Create a new user group."""
    with tool_call("user_group_create", "POST", "/api/user-groups"):
        body = UserGroupCreateRequest(friendly_name=friendly_name, name=name).to_body()
        result = await pocketid_api.user_groups.create(body)
    return tool_output(result, "User group created")


async def user_group_update(
    group_id: Identifier,
    friendly_name: Optional[str] = None,
    name: Optional[str] = None,
):
    """Update a user group."""
    with tool_call("user_group_update", "PUT", _group_path(group_id), group_id):
        require_id(group_id, "group_id")
        body = UserGroupUpdateRequest(friendly_name=friendly_name, name=name).to_body()
        result = await pocketid_api.user_groups.update(group_id, body)
    return tool_output(result, "User group updated")


async def user_group_delete(group_id: Identifier):
    """Delete a user group."""
    with tool_call("user_group_delete", "DELETE", _group_path(group_id), group_id):
        require_id(group_id, "group_id")
        await pocketid_api.user_groups.delete(group_id)
    return "User group deleted"


async def user_group_update_users(group_id: Identifier, user_ids: List[Identifier]):
    """Replace the members of a user group."""
    path = _group_path(group_id, "/users")
    with tool_call("user_group_update_users", "PUT", path, group_id):
        require_id(group_id, "group_id")
        member_ids = require_ids(user_ids, "user_ids")
        result = await pocketid_api.user_groups.update_users(group_id, member_ids)
    return tool_output(result, "Group members updated")


async def user_group_update_allowed_clients(
    group_id: Identifier, oidc_client_ids: List[Identifier]
):
    """Replace the OIDC clients a user group may use."""
    path = _group_path(group_id, "/allowed-oidc-clients")
    with tool_call("user_group_update_allowed_clients", "PUT", path, group_id):
        require_id(group_id, "group_id")
        client_ids = require_ids(oidc_client_ids, "oidc_client_ids")
        result = await pocketid_api.user_groups.update_allowed_clients(
            group_id, client_ids
        )
    return tool_output(result, "Allowed OIDC clients updated")


def register_user_group_tools(server: FastMCP) -> None:
    """Register user group tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="user_group_list", description="List user groups (paginated)"
    )(user_group_list)
    server.tool(name="user_group_get", description="Get a user group by ID")(
        user_group_get
    )
    server.tool(name="user_group_create", description="Create a new user group")(
        user_group_create
    )
    server.tool(name="user_group_update", description="Update a user group")(
        user_group_update
    )
    server.tool(name="user_group_delete", description="Delete a user group")(
        user_group_delete
    )
    server.tool(
        name="user_group_update_users", description="Update users in a group"
    )(user_group_update_users)
    server.tool(
        name="user_group_update_allowed_clients",
        description="Update allowed OIDC clients for a user group",
    )(user_group_update_allowed_clients)
