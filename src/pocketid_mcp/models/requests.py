"""Request body models for the Pocket ID API.

Tool arguments arrive in snake_case; Pocket ID expects camelCase JSON.
Each model validates the arguments and renders the wire body with
:meth:`RequestModel.to_body`, leaving out every field that was not set.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

SortDirection = Literal["asc", "desc"]

# Path identifiers and ID list items; an empty ID would address the collection
Identifier = Annotated[str, Field(min_length=1)]


class RequestModel(BaseModel):
    """Base model for request bodies.

    Provides camelCase aliases, population by field name and rejection
    of unknown fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def to_body(self) -> Dict[str, Any]:
        """Render the JSON body sent to Pocket ID.

        :return: camelCase mapping without unset fields
        :rtype: Dict[str, Any]
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class PaginationRequest(RequestModel):
    """Pagination arguments shared by list tools."""

    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1)
    search: Optional[str] = None
    sort_column: Optional[str] = None
    sort_direction: Optional[SortDirection] = None


# User Models
class UserCreateRequest(RequestModel):
    """Body of ``POST /api/users``."""

    display_name: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    last_name: Optional[str] = None
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    email_verified: Optional[bool] = None
    is_admin: Optional[bool] = None
    disabled: Optional[bool] = None
    locale: Optional[str] = None
    user_group_ids: Optional[List[Identifier]] = None


class UserUpdateRequest(RequestModel):
    """Body of ``PUT /api/users/{id}``; every field optional."""

    display_name: Optional[str] = Field(None, min_length=1)
    first_name: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = None
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    email_verified: Optional[bool] = None
    is_admin: Optional[bool] = None
    disabled: Optional[bool] = None
    locale: Optional[str] = None
    user_group_ids: Optional[List[Identifier]] = None


# User Group Models
class UserGroupCreateRequest(RequestModel):
    """Body of ``POST /api/user-groups``."""

    friendly_name: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class UserGroupUpdateRequest(RequestModel):
    """Body of ``PUT /api/user-groups/{id}``."""

    friendly_name: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)


# OIDC Client Models
class OidcClientCreateRequest(RequestModel):
    """Body of ``POST /api/oidc/clients``.

    Pocket ID spells the URL lists ``callbackURLs`` and ``logoutURLs``,
    which the generated camelCase aliases would not match.
    """

    name: str = Field(..., min_length=1)
    callback_urls: Optional[List[str]] = Field(None, alias="callbackURLs")
    logout_urls: Optional[List[str]] = Field(None, alias="logoutURLs")
    is_public: Optional[bool] = None
    pkce_enabled: Optional[bool] = None
    has_logo: Optional[bool] = None


class OidcClientUpdateRequest(OidcClientCreateRequest):
    """Body of ``PUT /api/oidc/clients/{id}``."""

    name: Optional[str] = Field(None, min_length=1)


# API Key Models
class ApiKeyCreateRequest(RequestModel):
    """Body of ``POST /api/api-keys``.

    :param expires_at: ISO-8601 timestamp, e.g. ``2026-12-31T00:00:00Z``
    """

    name: str = Field(..., min_length=3)
    expires_at: str = Field(
        ..., pattern=r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})$"
    )
    description: Optional[str] = None


# Application Configuration Models
class AppConfigUpdateRequest(RequestModel):
    """Body of ``PUT /api/application-configuration``."""

    app_name: Optional[str] = None
    session_duration: Optional[int] = None
    emails_verified: Optional[bool] = None
    allow_own_account_edit: Optional[bool] = None
    smtp_enabled: Optional[bool] = None
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_from: Optional[str] = None
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_tls: Optional[bool] = None
    smtp_skip_cert_verify: Optional[bool] = None
    ldap_enabled: Optional[bool] = None
    ldap_url: Optional[str] = None
    ldap_bind_dn: Optional[str] = None
    ldap_bind_password: Optional[str] = None
    ldap_base_dn: Optional[str] = None
    ldap_admin_group: Optional[str] = None
    ldap_skip_cert_verify: Optional[bool] = None


class EmailTestRequest(RequestModel):
    """Body of ``POST /api/application-configuration/test-email``."""

    email: str = Field(..., pattern=EMAIL_PATTERN)


# Custom Claim Models
class CustomClaim(RequestModel):
    """A single custom claim key/value pair."""

    key: str = Field(..., min_length=1)
    value: str


# Signup Token Models
class SignupTokenCreateRequest(RequestModel):
    """Body of ``POST /api/signup-tokens``.

    :param ttl: Token lifetime as a duration string, e.g. ``24h``
    """

    ttl: str = Field(..., min_length=1)
    usage_limit: int = Field(..., ge=1, le=100)
    user_group_ids: Optional[List[Identifier]] = None


# SCIM Models
class ScimServiceProviderCreateRequest(RequestModel):
    """Body of ``POST /api/scim/service-provider``."""

    endpoint: str = Field(..., pattern=r"^https?://\S+$")
    oidc_client_id: str = Field(..., min_length=1)
    token: str = Field(..., min_length=1)


class ScimServiceProviderUpdateRequest(RequestModel):
    """Body of ``PUT /api/scim/service-provider/{id}``."""

    endpoint: Optional[str] = Field(None, pattern=r"^https?://\S+$")
    oidc_client_id: Optional[str] = Field(None, min_length=1)
    token: Optional[str] = Field(None, min_length=1)
