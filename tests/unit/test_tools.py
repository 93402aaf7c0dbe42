"""Unit tests for tool handlers: results, errors and audit records."""

import base64
import json
import logging

import httpx
import pytest
from fastmcp.exceptions import ToolError

from pocketid_mcp.tools import (
    api_keys,
    app_config,
    app_images,
    custom_claims,
    oidc_clients,
    scim,
    signup_tokens,
    user_groups,
    users,
    utility,
)
from pocketid_mcp.tools.utils import audit_log, tool_output
from pocketid_mcp.utils.http import ApiResult

AUDIT_LOGGER = "pocketid_mcp.audit"


def audit_records(caplog):
    return [r.audit for r in caplog.records if r.name == AUDIT_LOGGER]


def test_tool_output_shapes():
    assert tool_output(ApiResult.empty(), "Done") == "Done"
    assert tool_output(ApiResult.json({"a": 1})) == {"a": 1}
    assert tool_output(ApiResult.text("plain")) == "plain"


def test_audit_log_record(caplog):
    with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER):
        audit_log("user_delete", "DELETE", "/api/users/1", "1", success=False)

    assert audit_records(caplog) == [
        {
            "tool": "user_delete",
            "httpMethod": "DELETE",
            "path": "/api/users/1",
            "resourceId": "1",
            "success": False,
        }
    ]


@pytest.mark.asyncio
async def test_list_tool_returns_parsed_json(pocketid_client, fake_pocketid):
    page = {"data": [{"id": "1"}], "pagination": {"totalItems": 1}}
    fake_pocketid.add("GET", "/api/users", httpx.Response(200, json=page))

    result = await users.user_list(page=1, limit=20, search="ada")

    assert result == page
    params = fake_pocketid.api_requests[0].url.params
    assert params["pagination[limit]"] == "20"
    assert params["search"] == "ada"


@pytest.mark.asyncio
async def test_invalid_pagination_is_rejected(pocketid_client, fake_pocketid):
    with pytest.raises(ToolError):
        await users.user_list(sort_direction="sideways")
    with pytest.raises(ToolError):
        await users.user_list(page=0)
    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_create_sends_camel_case_without_unset_fields(pocketid_client, fake_pocketid):
    fake_pocketid.add("POST", "/api/users", httpx.Response(201, json={"id": "u1"}))

    result = await users.user_create(
        display_name="Ada L", first_name="Ada", username="ada", is_admin=True
    )

    assert result == {"id": "u1"}
    body = json.loads(fake_pocketid.api_requests[0].content)
    assert body == {
        "displayName": "Ada L",
        "firstName": "Ada",
        "username": "ada",
        "isAdmin": True,
    }


@pytest.mark.asyncio
async def test_delete_is_audited(pocketid_client, fake_pocketid, caplog):
    fake_pocketid.add("DELETE", "/api/users/u1", httpx.Response(204))

    with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER):
        result = await users.user_delete("u1")

    assert result == "User deleted"
    assert audit_records(caplog) == [
        {
            "tool": "user_delete",
            "httpMethod": "DELETE",
            "path": "/api/users/u1",
            "resourceId": "u1",
            "success": True,
        }
    ]


@pytest.mark.asyncio
async def test_upstream_error_becomes_tool_error(pocketid_client, fake_pocketid, caplog):
    with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER):
        with pytest.raises(ToolError) as excinfo:
            await users.user_delete("missing")

    assert str(excinfo.value) == (
        "Pocket ID DELETE /api/users/missing failed (404): not found"
    )
    records = audit_records(caplog)
    assert len(records) == 1
    assert records[0]["success"] is False


@pytest.mark.asyncio
async def test_read_only_tools_are_not_audited(pocketid_client, fake_pocketid, caplog):
    fake_pocketid.add("GET", "/api/users/u1", httpx.Response(200, json={"id": "u1"}))

    with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER):
        await users.user_get("u1")

    assert audit_records(caplog) == []


@pytest.mark.asyncio
async def test_validation_failure_makes_no_request(pocketid_client, fake_pocketid):
    with pytest.raises(ToolError):
        await api_keys.api_key_create(name="ab", expires_at="2030-01-01T00:00:00Z")
    with pytest.raises(ToolError):
        await api_keys.api_key_create(name="deploy", expires_at="tomorrow")

    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_image_upload_with_bad_payload(pocketid_client, fake_pocketid):
    with pytest.raises(ToolError, match="Invalid base64 payload"):
        await app_images.app_image_update_logo("%%%", "image/png")

    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_image_upload_with_empty_payload(pocketid_client, fake_pocketid):
    with pytest.raises(ToolError, match="Invalid base64 payload"):
        await app_images.app_image_update_logo("")
    with pytest.raises(ToolError, match="Invalid base64 payload"):
        await app_images.app_image_update_favicon("  \n ")

    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_empty_id_makes_no_request(pocketid_client, fake_pocketid, caplog):
    with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER):
        with pytest.raises(ToolError, match="user_id must be a non-empty string"):
            await users.user_delete("")

    assert fake_pocketid.requests == []
    records = audit_records(caplog)
    assert len(records) == 1
    assert records[0]["success"] is False


@pytest.mark.asyncio
async def test_empty_ids_are_rejected_across_tools(pocketid_client, fake_pocketid):
    with pytest.raises(ToolError):
        await users.user_get("")
    with pytest.raises(ToolError):
        await user_groups.user_group_delete("")
    with pytest.raises(ToolError):
        await oidc_clients.oidc_client_preview_claims("c1", "")
    with pytest.raises(ToolError):
        await api_keys.api_key_renew("")
    with pytest.raises(ToolError):
        await signup_tokens.signup_token_delete("")
    with pytest.raises(ToolError):
        await scim.scim_provider_sync("")
    with pytest.raises(ToolError):
        await custom_claims.custom_claim_set_group("", [])

    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_empty_id_in_list_is_rejected(pocketid_client, fake_pocketid):
    with pytest.raises(ToolError, match="user_group_ids must contain non-empty strings"):
        await users.user_update_groups("u1", ["g1", ""])
    with pytest.raises(ToolError):
        await user_groups.user_group_update_users("g1", [""])

    assert fake_pocketid.requests == []


@pytest.mark.asyncio
async def test_empty_list_clears_memberships(pocketid_client, fake_pocketid):
    fake_pocketid.add("PUT", "/api/users/u1/user-groups", httpx.Response(200, json=[]))

    await users.user_update_groups("u1", [])

    assert json.loads(fake_pocketid.api_requests[0].content) == {"userGroupIds": []}


@pytest.mark.asyncio
async def test_audit_path_matches_encoded_request(pocketid_client, fake_pocketid, caplog):
    fake_pocketid.add("DELETE", "/api/users/a/b", httpx.Response(204))

    with caplog.at_level(logging.INFO, logger=AUDIT_LOGGER):
        await users.user_delete("a/b")

    assert fake_pocketid.api_requests[0].url.raw_path == b"/api/users/a%2Fb"
    records = audit_records(caplog)
    assert records[0]["path"] == "/api/users/a%2Fb"
    assert records[0]["resourceId"] == "a/b"


@pytest.mark.asyncio
async def test_image_upload(pocketid_client, fake_pocketid):
    fake_pocketid.add("PUT", "/api/application-images/background", httpx.Response(204))

    result = await app_images.app_image_update_background(
        base64.b64encode(b"jpeg-bytes").decode(), "image/jpeg"
    )

    assert result == "Background image updated"
    assert b"jpeg-bytes" in fake_pocketid.api_requests[0].content


@pytest.mark.asyncio
async def test_custom_claims_are_validated(pocketid_client, fake_pocketid):
    fake_pocketid.add("PUT", "/api/custom-claims/user/u1", httpx.Response(200, json=[]))

    await custom_claims.custom_claim_set_user("u1", [{"key": "dept", "value": "eng"}])
    body = json.loads(fake_pocketid.api_requests[0].content)
    assert body == [{"key": "dept", "value": "eng"}]

    with pytest.raises(ToolError):
        await custom_claims.custom_claim_set_user("u1", [{"value": "no key"}])


@pytest.mark.asyncio
async def test_test_email_requires_valid_address(pocketid_client, fake_pocketid):
    fake_pocketid.add(
        "POST", "/api/application-configuration/test-email", httpx.Response(204)
    )

    assert await app_config.app_config_test_email("ops@example.com") == "Test email sent"
    body = json.loads(fake_pocketid.api_requests[0].content)
    assert body == {"email": "ops@example.com"}

    with pytest.raises(ToolError):
        await app_config.app_config_test_email("not-an-email")


@pytest.mark.asyncio
async def test_health_check_returns_text(pocketid_client, fake_pocketid):
    result = await utility.health_check()
    assert result == "OK"


@pytest.mark.asyncio
async def test_configuration_error_reaches_caller(monkeypatch, fake_pocketid):
    monkeypatch.setenv("POCKETID_API_KEY", "")

    with pytest.raises(ToolError, match="POCKETID_API_KEY"):
        await users.user_get("u1")
