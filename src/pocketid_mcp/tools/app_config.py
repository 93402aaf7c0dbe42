"""Application configuration tools for Pocket ID MCP.

This module exposes the public and full application configuration, its
update, and the two side-effect endpoints: test email and LDAP sync.
"""

from typing import Optional

from fastmcp import FastMCP

from ..api import pocketid_api
from ..models import AppConfigUpdateRequest, EmailTestRequest
from .utils import tool_call, tool_output

APP_CONFIG_PATH = "/api/application-configuration"


async def app_config_get():
    """Get the public application configuration."""
    with tool_call("app_config_get"):
        result = await pocketid_api.app_config.get_public()
    return tool_output(result)


async def app_config_get_all():
    """Get the full application configuration (admin)."""
    with tool_call("app_config_get_all"):
        result = await pocketid_api.app_config.get_all()
    return tool_output(result)


async def app_config_update(
    app_name: Optional[str] = None,
    session_duration: Optional[int] = None,
    emails_verified: Optional[bool] = None,
    allow_own_account_edit: Optional[bool] = None,
    smtp_enabled: Optional[bool] = None,
    smtp_host: Optional[str] = None,
    smtp_port: Optional[int] = None,
    smtp_from: Optional[str] = None,
    smtp_user: Optional[str] = None,
    smtp_password: Optional[str] = None,
    smtp_tls: Optional[bool] = None,
    smtp_skip_cert_verify: Optional[bool] = None,
    ldap_enabled: Optional[bool] = None,
    ldap_url: Optional[str] = None,
    ldap_bind_dn: Optional[str] = None,
    ldap_bind_password: Optional[str] = None,
    ldap_base_dn: Optional[str] = None,
    ldap_admin_group: Optional[str] = None,
    ldap_skip_cert_verify: Optional[bool] = None,
):
    """Update the application configuration.

    Only the settings that are passed are sent to Pocket ID.
    """
    with tool_call("app_config_update", "PUT", APP_CONFIG_PATH):
        body = AppConfigUpdateRequest(
            app_name=app_name,
            session_duration=session_duration,
            emails_verified=emails_verified,
            allow_own_account_edit=allow_own_account_edit,
            smtp_enabled=smtp_enabled,
            smtp_host=smtp_host,
            smtp_port=smtp_port,
            smtp_from=smtp_from,
            smtp_user=smtp_user,
            smtp_password=smtp_password,
            smtp_tls=smtp_tls,
            smtp_skip_cert_verify=smtp_skip_cert_verify,
            ldap_enabled=ldap_enabled,
            ldap_url=ldap_url,
            ldap_bind_dn=ldap_bind_dn,
            ldap_bind_password=ldap_bind_password,
            ldap_base_dn=ldap_base_dn,
            ldap_admin_group=ldap_admin_group,
            ldap_skip_cert_verify=ldap_skip_cert_verify,
        ).to_body()
        result = await pocketid_api.app_config.update(body)
    return tool_output(result, "Application configuration updated")


async def app_config_test_email(email: str):
    """Send a test email using the configured SMTP settings."""
    path = f"{APP_CONFIG_PATH}/test-email"
    with tool_call("app_config_test_email", "POST", path):
        request = EmailTestRequest(email=email)
        await pocketid_api.app_config.test_email(request.email)
    return "Test email sent"


async def app_config_sync_ldap():
    """Trigger an LDAP synchronization."""
    path = f"{APP_CONFIG_PATH}/sync-ldap"
    with tool_call("app_config_sync_ldap", "POST", path):
        await pocketid_api.app_config.sync_ldap()
    return "LDAP sync triggered"


def register_app_config_tools(server: FastMCP) -> None:
    """Register application configuration tools.

    :param server: FastMCP server instance.
    """
    server.tool(
        name="app_config_get",
        description="Get the public application configuration",
    )(app_config_get)
    server.tool(
        name="app_config_get_all",
        description="Get the full application configuration (admin)",
    )(app_config_get_all)
    server.tool(
        name="app_config_update",
        description="Update the application configuration",
    )(app_config_update)
    server.tool(
        name="app_config_test_email",
        description="Send a test email",
    )(app_config_test_email)
    server.tool(
        name="app_config_sync_ldap",
        description="Trigger LDAP synchronization",
    )(app_config_sync_ldap)
