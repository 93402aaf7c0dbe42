"""Signup token tools for Pocket ID MCP."""

from typing import List, Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import Identifier, SignupTokenCreateRequest
from ..utils.http import quote_segment
from .utils import pagination_params, require_id, tool_call, tool_output


async def signup_token_list(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
):
    """List signup tokens (paginated)."""
    with tool_call("signup_token_list"):
        params = pagination_params(page, limit, search, sort_column, sort_direction)
        result = await pocketid_api.signup_tokens.list(params)
    return tool_output(result)


async def signup_token_create(
    ttl: str, usage_limit: int, user_group_ids: Optional[List[Identifier]] = None
):
    """Create a signup token.

    :param ttl: Token lifetime, e.g. ``24h``
    :param usage_limit: Number of signups allowed, 1 to 100
    :param user_group_ids: Groups new users are added to
    """
    with tool_call("signup_token_create", "POST", "/api/signup-tokens"):
        body = SignupTokenCreateRequest(
            ttl=ttl, usage_limit=usage_limit, user_group_ids=user_group_ids
        ).to_body()
        result = await pocketid_api.signup_tokens.create(body)
    return tool_output(result, "Signup token created")


async def signup_token_delete(token_id: Identifier):
    """Delete a signup token."""
    path = f"/api/signup-tokens/{quote_segment(token_id)}"
    with tool_call("signup_token_delete", "DELETE", path, token_id):
        require_id(token_id, "token_id")
        await pocketid_api.signup_tokens.delete(token_id)
    return "Signup token deleted"


def register_signup_token_tools(server: FastMCP) -> None:
    """Register signup token tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="signup_token_list", description="List signup tokens (paginated)"
    )(signup_token_list)
    server.tool(
        name="signup_token_create", description="Create a signup token"
    )(signup_token_create)
    server.tool(
        name="signup_token_delete", description="Delete a signup token"
    )(signup_token_delete)
