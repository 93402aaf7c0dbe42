"""Tools module for Pocket ID MCP.

This module provides one MCP tool per Pocket ID operation, grouped by
resource. Each resource module exposes a ``register_*_tools`` function
that attaches its tools to a FastMCP server.

:var __all__: List of public exports from this module
:type __all__: List[str]
"""

from .api_keys import register_api_key_tools
from .app_config import register_app_config_tools
from .app_images import register_app_image_tools
from .audit_logs import register_audit_log_tools
from .custom_claims import register_custom_claim_tools
from .oidc_clients import register_oidc_client_tools
from .oidc_discovery import register_oidc_discovery_tools
from .scim import register_scim_tools
from .signup_tokens import register_signup_token_tools
from .user_groups import register_user_group_tools
from .users import register_user_tools
from .utility import register_utility_tools

__all__ = [
    "register_user_tools",
    "register_user_group_tools",
    "register_oidc_client_tools",
    "register_api_key_tools",
    "register_audit_log_tools",
    "register_custom_claim_tools",
    "register_app_config_tools",
    "register_app_image_tools",
    "register_signup_token_tools",
    "register_scim_tools",
    "register_oidc_discovery_tools",
    "register_utility_tools",
]
