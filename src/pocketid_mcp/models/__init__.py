"""Pocket ID MCP models package.

This package contains the Pydantic models used to validate tool
arguments and render request bodies for the Pocket ID API.
"""

from .requests import (
    ApiKeyCreateRequest,
    AppConfigUpdateRequest,
    CustomClaim,
    EmailTestRequest,
    Identifier,
    OidcClientCreateRequest,
    OidcClientUpdateRequest,
    PaginationRequest,
    RequestModel,
    ScimServiceProviderCreateRequest,
    ScimServiceProviderUpdateRequest,
    SignupTokenCreateRequest,
    UserCreateRequest,
    UserGroupCreateRequest,
    UserGroupUpdateRequest,
    UserUpdateRequest,
)

__all__ = [
    "Identifier",
    "RequestModel",
    "PaginationRequest",
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserGroupCreateRequest",
    "UserGroupUpdateRequest",
    "OidcClientCreateRequest",
    "OidcClientUpdateRequest",
    "ApiKeyCreateRequest",
    "AppConfigUpdateRequest",
    "EmailTestRequest",
    "CustomClaim",
    "SignupTokenCreateRequest",
    "ScimServiceProviderCreateRequest",
    "ScimServiceProviderUpdateRequest",
]
