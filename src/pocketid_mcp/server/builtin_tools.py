"""Register built-in tools for the MCP server.

Attach every Pocket ID resource tool group to a FastMCP server.

Examples
--------
.. code-block:: python

   import asyncio
   from fastmcp import FastMCP
   from pocketid_mcp.server.builtin_tools import register_all_builtin_tools

   async def main():
       server = FastMCP("pocketid-mcp")
       await register_all_builtin_tools(server)

   asyncio.run(main())
"""

import logging

from fastmcp import FastMCP

from ..tools import (
    register_api_key_tools,
    register_app_config_tools,
    register_app_image_tools,
    register_audit_log_tools,
    register_custom_claim_tools,
    register_oidc_client_tools,
    register_oidc_discovery_tools,
    register_scim_tools,
    register_signup_token_tools,
    register_user_group_tools,
    register_user_tools,
    register_utility_tools,
)

logger = logging.getLogger(__name__)

TOOL_GROUPS = (
    ("users", register_user_tools),
    ("user groups", register_user_group_tools),
    ("OIDC clients", register_oidc_client_tools),
    ("API keys", register_api_key_tools),
    ("audit logs", register_audit_log_tools),
    ("custom claims", register_custom_claim_tools),
    ("application configuration", register_app_config_tools),
    ("application images", register_app_image_tools),
    ("signup tokens", register_signup_token_tools),
    ("SCIM", register_scim_tools),
    ("OIDC discovery", register_oidc_discovery_tools),
    ("utility", register_utility_tools),
)


async def register_all_builtin_tools(server: FastMCP):
    """Register all built-in tools with the server.

    :param server: FastMCP server instance.
    """
    for label, register in TOOL_GROUPS:
        register(server)
        logger.debug("Registered %s tools", label)

    logger.info("Registered all built-in tools")
