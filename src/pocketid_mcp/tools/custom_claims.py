"""Custom claim tools for Pocket ID MCP.

Custom claims are key/value pairs added to the ID token of a user or of
every member of a user group. Setting claims replaces the full list.
"""

from typing import Dict, List

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import CustomClaim, Identifier
from ..utils.http import quote_segment
from .utils import require_id, tool_call, tool_output


def _claims_body(claims: List[Dict[str, str]]) -> List[Dict[str, str]]:
    return [CustomClaim.model_validate(claim).to_body() for claim in claims]


async def custom_claim_suggestions():
    """List suggested custom claim keys."""
    with tool_call("custom_claim_suggestions"):
        result = await pocketid_api.custom_claims.suggestions()
    return tool_output(result)


async def custom_claim_set_user(user_id: Identifier, claims: List[Dict[str, str]]):
    """Replace the custom claims of a user.

    :param user_id: User ID
    :param claims: List of ``{"key": ..., "value": ...}`` objects
    """
    path = f"/api/custom-claims/user/{quote_segment(user_id)}"
    with tool_call("custom_claim_set_user", "PUT", path, user_id):
        require_id(user_id, "user_id")
        result = await pocketid_api.custom_claims.set_for_user(
            user_id, _claims_body(claims)
        )
    return tool_output(result, "Custom claims updated")


async def custom_claim_set_group(
    user_group_id: Identifier, claims: List[Dict[str, str]]
):
    """Replace the custom claims of a user group.

    :param user_group_id: User group ID
    :param claims: List of ``{"key": ..., "value": ...}`` objects
    """
    path = f"/api/custom-claims/user-group/{quote_segment(user_group_id)}"
    with tool_call("custom_claim_set_group", "PUT", path, user_group_id):
        require_id(user_group_id, "user_group_id")
        result = await pocketid_api.custom_claims.set_for_group(
            user_group_id, _claims_body(claims)
        )
    return tool_output(result, "Custom claims updated")


def register_custom_claim_tools(server: FastMCP) -> None:
    """Register custom claim tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="custom_claim_suggestions",
        description="List suggested custom claim keys",
    )(custom_claim_suggestions)
    server.tool(
        name="custom_claim_set_user",
        description="Set custom claims for a user",
    )(custom_claim_set_user)
    server.tool(
        name="custom_claim_set_group",
        description="Set custom claims for a user group",
    )(custom_claim_set_group)
