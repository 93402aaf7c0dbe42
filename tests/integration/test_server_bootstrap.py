"""Integration tests for Pocket ID MCP server bootstrap.

This module builds the full server and drives it through an in-memory
MCP client against a fake Pocket ID instance.
"""

import httpx
import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from pocketid_mcp.config.settings import Settings
from pocketid_mcp.server.mcp_server import create_pocketid_server
from pocketid_mcp.server.server_builder import ServerBuilder

EXPECTED_TOOLS = {
    "user_list",
    "user_get",
    "user_create",
    "user_update",
    "user_delete",
    "user_groups",
    "user_update_groups",
    "user_create_one_time_access_token",
    "user_send_access_email",
    "user_group_list",
    "user_group_get",
    "user_group_create",
    "user_group_update",
    "user_group_delete",
    "user_group_update_users",
    "user_group_update_allowed_clients",
    "oidc_client_list",
    "oidc_client_get",
    "oidc_client_create",
    "oidc_client_update",
    "oidc_client_delete",
    "oidc_client_create_secret",
    "oidc_client_update_allowed_groups",
    "oidc_client_preview_claims",
    "oidc_client_authorized_list",
    "oidc_client_revoke_authorization",
    "api_key_list",
    "api_key_create",
    "api_key_renew",
    "api_key_delete",
    "audit_log_list",
    "audit_log_list_all",
    "audit_log_filter_clients",
    "audit_log_filter_users",
    "custom_claim_suggestions",
    "custom_claim_set_user",
    "custom_claim_set_group",
    "app_config_get",
    "app_config_get_all",
    "app_config_update",
    "app_config_test_email",
    "app_config_sync_ldap",
    "app_image_update_logo",
    "app_image_update_favicon",
    "app_image_update_background",
    "app_image_delete_default_profile_picture",
    "signup_token_list",
    "signup_token_create",
    "signup_token_delete",
    "scim_provider_create",
    "scim_provider_update",
    "scim_provider_delete",
    "scim_provider_sync",
    "oidc_discovery",
    "oidc_jwks",
    "health_check",
    "version_latest",
}


@pytest.mark.asyncio
async def test_create_server_bootstrap():
    srv = await create_pocketid_server()
    assert srv.name == "pocketid-test"

    async with Client(srv) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == EXPECTED_TOOLS


@pytest.mark.asyncio
async def test_builder_without_endpoint_still_builds(monkeypatch):
    monkeypatch.setenv("POCKETID_URL", "")
    builder = ServerBuilder(Settings())

    srv = await builder.build()

    assert srv is builder.server
    assert builder.client is not None


@pytest.mark.asyncio
async def test_tool_call_round_trip(pocketid_client, fake_pocketid):
    fake_pocketid.add(
        "GET", "/api/user-groups/g1", httpx.Response(200, json={"id": "g1"})
    )
    srv = await create_pocketid_server()

    async with Client(srv) as client:
        result = await client.call_tool("user_group_get", {"group_id": "g1"})
        with pytest.raises(ToolError, match="404"):
            await client.call_tool("user_group_get", {"group_id": "nope"})

    assert not result.is_error
    assert '"g1"' in result.content[0].text


@pytest.mark.asyncio
async def test_identifier_arguments_require_content(pocketid_client, fake_pocketid):
    srv = await create_pocketid_server()

    async with Client(srv) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}
        with pytest.raises(ToolError):
            await client.call_tool("user_delete", {"user_id": ""})

    assert tools["user_delete"].inputSchema["properties"]["user_id"]["minLength"] == 1
    payload = tools["app_image_update_logo"].inputSchema["properties"]["base64_data"]
    assert payload["minLength"] == 1
    assert fake_pocketid.api_requests == []


@pytest.mark.asyncio
async def test_tool_arguments_use_snake_case():
    srv = await create_pocketid_server()

    async with Client(srv) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    create = tools["user_create"].inputSchema["properties"]
    assert "display_name" in create and "displayName" not in create
    assert set(tools["user_delete"].inputSchema["properties"]) == {"user_id"}
