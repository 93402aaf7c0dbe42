"""User management tools for Pocket ID MCP.

This module provides tools for listing, reading, creating, updating and
deleting Pocket ID users, managing their group memberships, and issuing
one-time access tokens and emails.

Examples:
    >>> users = await user_list(page=1, limit=20, search="ada")
    >>> user = await user_create(display_name="Ada", first_name="Ada", username="ada")
"""

import logging
from typing import List, Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import Identifier, UserCreateRequest, UserUpdateRequest
from ..utils.http import quote_segment
from .utils import pagination_params, require_id, require_ids, tool_call, tool_output

logger = logging.getLogger(__name__)


def _user_path(user_id: str, suffix: str = "") -> str:
    return f"/api/users/{quote_segment(user_id)}{suffix}"


async def user_list(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List users (paginated)."""
    with tool_call("user_list"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.users.list(params)
    return tool_output(result)


async def user_get(user_id: Identifier):
    """Get a user by ID."""
    with tool_call("user_get"):
        require_id(user_id, "user_id")
        result = await pocketid_api.users.get(user_id)
    return tool_output(result)


async def user_create(
    display_name: str,
    first_name: str,
    username: str,
    last_name: Optional[str] = None,
    email: Optional[str] = None,
    email_verified: Optional[bool] = None,
    is_admin: Optional[bool] = None,
    disabled: Optional[bool] = None,
    locale: Optional[str] = None,
    user_group_ids: Optional[List[Identifier]] = None,
):
    """Create a new user."""
    with tool_call("user_create", "POST", "/api/users"):
        body = UserCreateRequest(
            display_name=display_name,
            first_name=first_name,
            username=username,
            last_name=last_name,
            email=email,
            email_verified=email_verified,
            is_admin=is_admin,
            disabled=disabled,
            locale=locale,
            user_group_ids=user_group_ids,
        ).to_body()
        result = await pocketid_api.users.create(body)
    return tool_output(result, "User created")


async def user_update(
    user_id: Identifier,
    display_name: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    email: Optional[str] = None,
    email_verified: Optional[bool] = None,
    username: Optional[str] = None,
    is_admin: Optional[bool] = None,
    disabled: Optional[bool] = None,
    locale: Optional[str] = None,
    user_group_ids: Optional[List[Identifier]] = None,
):
    """Update an existing user.

    Only the fields that are passed are sent to Pocket ID.
    """
    with tool_call("user_update", "PUT", _user_path(user_id), user_id):
        require_id(user_id, "user_id")
        body = UserUpdateRequest(
            display_name=display_name,
            first_name=first_name,
            last_name=last_name,
            email=email,
            email_verified=email_verified,
            username=username,
            is_admin=is_admin,
            disabled=disabled,
            locale=locale,
            user_group_ids=user_group_ids,
        ).to_body()
        result = await pocketid_api.users.update(user_id, body)
    return tool_output(result, "User updated")


async def user_delete(user_id: Identifier):
    """Delete a user."""
    with tool_call("user_delete", "DELETE", _user_path(user_id), user_id):
        require_id(user_id, "user_id")
        await pocketid_api.users.delete(user_id)
    return "User deleted"


async def user_groups(user_id: Identifier):
    """List groups a user belongs to."""
    with tool_call("user_groups"):
        require_id(user_id, "user_id")
        result = await pocketid_api.users.get_groups(user_id)
    return tool_output(result)


async def user_update_groups(user_id: Identifier, user_group_ids: List[Identifier]):
    """Replace the groups a user belongs to."""
    path = _user_path(user_id, "/user-groups")
    with tool_call("user_update_groups", "PUT", path, user_id):
        require_id(user_id, "user_id")
        group_ids = require_ids(user_group_ids, "user_group_ids")
        result = await pocketid_api.users.update_groups(user_id, group_ids)
    return tool_output(result, "User groups updated")


async def user_create_one_time_access_token(user_id: Identifier):
    """Create a one-time access token for a user."""
    path = _user_path(user_id, "/one-time-access-token")
    with tool_call("user_create_one_time_access_token", "POST", path, user_id):
        require_id(user_id, "user_id")
        result = await pocketid_api.users.create_one_time_token(user_id)
    return tool_output(result)


async def user_send_access_email(user_id: Identifier):
    """Send a one-time access email to a user."""
    path = _user_path(user_id, "/one-time-access-email")
    with tool_call("user_send_access_email", "POST", path, user_id):
        require_id(user_id, "user_id")
        await pocketid_api.users.send_one_time_email(user_id)
    return "One-time access email sent"


def register_user_tools(server: FastMCP) -> None:
    """Register user management tools.

    :param server: FastMCP server instance.
    """
    server.tool(name="user_list", description="List users (paginated)")(user_list)
    server.tool(name="user_get", description="Get a user by ID")(user_get)
    server.tool(name="user_create", description="Create a new user")(user_create)
    server.tool(name="user_update", description="Update an existing user")(user_update)
    server.tool(name="user_delete", description="Delete a user")(user_delete)
    server.tool(
        name="user_groups", description="List groups a user belongs to"
    )(user_groups)
    server.tool(
        name="user_update_groups",
        description="Update the groups a user belongs to",
    )(user_update_groups)
    server.tool(
        name="user_create_one_time_access_token",
        description="Create a one-time access token for a user",
    )(user_create_one_time_access_token)
    server.tool(
        name="user_send_access_email",
        description="Send a one-time access email to a user",
    )(user_send_access_email)
