"""Pocket ID resource catalogue.

One class per Pocket ID resource, each method a single call on the verb
facade in :mod:`pocketid_mcp.api.client`. Identifiers taken from tool
arguments are percent-encoded before they become path segments.

Examples:
    >>> result = await pocketid_api.users.get("c0ffee")
    >>> result.data["username"]
"""

from typing import Any, Dict, List, Optional

from ..utils.http import ApiResult, quote_segment
from . import client
from .client import Pagination


class UsersApi:
    """``/api/users``"""

    async def list(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/users", params)

    async def get(self, user_id: str) -> ApiResult:
        return await client.get(f"/api/users/{quote_segment(user_id)}")

    async def create(self, body: Dict[str, Any]) -> ApiResult:
        return await client.post("/api/users", body)

    async def update(self, user_id: str, body: Dict[str, Any]) -> ApiResult:
        return await client.put(f"/api/users/{quote_segment(user_id)}", body)

    async def delete(self, user_id: str) -> ApiResult:
        return await client.delete(f"/api/users/{quote_segment(user_id)}")

    async def get_groups(self, user_id: str) -> ApiResult:
        return await client.get(f"/api/users/{quote_segment(user_id)}/groups")

    async def update_groups(self, user_id: str, user_group_ids: List[str]) -> ApiResult:
        return await client.put(
            f"/api/users/{quote_segment(user_id)}/user-groups",
            {"userGroupIds": user_group_ids},
        )

    async def create_one_time_token(self, user_id: str) -> ApiResult:
        return await client.post(
            f"/api/users/{quote_segment(user_id)}/one-time-access-token"
        )

    async def send_one_time_email(self, user_id: str) -> ApiResult:
        return await client.post(
            f"/api/users/{quote_segment(user_id)}/one-time-access-email"
        )


class UserGroupsApi:
    """``/api/user-groups``"""

    async def list(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/user-groups", params)

    async def get(self, group_id: str) -> ApiResult:
        return await client.get(f"/api/user-groups/{quote_segment(group_id)}")

    async def create(self, body: Dict[str, Any]) -> ApiResult:
        return await client.post("/api/user-groups", body)

    async def update(self, group_id: str, body: Dict[str, Any]) -> ApiResult:
        return await client.put(f"/api/user-groups/{quote_segment(group_id)}", body)

    async def delete(self, group_id: str) -> ApiResult:
        return await client.delete(f"/api/user-groups/{quote_segment(group_id)}")

    async def update_users(self, group_id: str, user_ids: List[str]) -> ApiResult:
        return await client.put(
            f"/api/user-groups/{quote_segment(group_id)}/users", {"userIds": user_ids}
        )

    async def update_allowed_clients(
        self, group_id: str, oidc_client_ids: List[str]
    ) -> ApiResult:
        return await client.put(
            f"/api/user-groups/{quote_segment(group_id)}/allowed-oidc-clients",
            {"oidcClientIds": oidc_client_ids},
        )


class OidcClientsApi:
    """``/api/oidc/clients`` and per-user authorizations"""

    async def list(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/oidc/clients", params)

    async def get(self, client_id: str) -> ApiResult:
        return await client.get(f"/api/oidc/clients/{quote_segment(client_id)}")

    async def create(self, body: Dict[str, Any]) -> ApiResult:
        return await client.post("/api/oidc/clients", body)

    async def update(self, client_id: str, body: Dict[str, Any]) -> ApiResult:
        return await client.put(f"/api/oidc/clients/{quote_segment(client_id)}", body)

    async def delete(self, client_id: str) -> ApiResult:
        return await client.delete(f"/api/oidc/clients/{quote_segment(client_id)}")

    async def create_secret(self, client_id: str) -> ApiResult:
        return await client.post(f"/api/oidc/clients/{quote_segment(client_id)}/secret")

    async def update_allowed_groups(
        self, client_id: str, user_group_ids: List[str]
    ) -> ApiResult:
        return await client.put(
            f"/api/oidc/clients/{quote_segment(client_id)}/allowed-user-groups",
            {"userGroupIds": user_group_ids},
        )

    async def preview_for_user(self, client_id: str, user_id: str) -> ApiResult:
        return await client.get(
            f"/api/oidc/clients/{quote_segment(client_id)}"
            f"/preview/{quote_segment(user_id)}"
        )

    async def list_authorized_for_user(self, user_id: str) -> ApiResult:
        return await client.get(
            f"/api/oidc/users/{quote_segment(user_id)}/authorized-clients"
        )

    async def revoke_authorization_for_current_user(self, client_id: str) -> ApiResult:
        return await client.delete(
            f"/api/oidc/users/me/authorized-clients/{quote_segment(client_id)}"
        )


class ApiKeysApi:
    """``/api/api-keys``"""

    async def list(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/api-keys", params)

    async def create(self, body: Dict[str, Any]) -> ApiResult:
        return await client.post("/api/api-keys", body)

    async def renew(self, key_id: str) -> ApiResult:
        return await client.post(f"/api/api-keys/{quote_segment(key_id)}/renew")

    async def delete(self, key_id: str) -> ApiResult:
        return await client.delete(f"/api/api-keys/{quote_segment(key_id)}")


class AuditLogsApi:
    """``/api/audit-logs``"""

    async def list_mine(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/audit-logs", params)

    async def list_all(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/audit-logs/all", params)

    async def filter_clients(self) -> ApiResult:
        return await client.get("/api/audit-logs/filters/client-names")

    async def filter_users(self) -> ApiResult:
        return await client.get("/api/audit-logs/filters/users")


class CustomClaimsApi:
    """``/api/custom-claims``"""

    async def suggestions(self) -> ApiResult:
        return await client.get("/api/custom-claims/suggestions")

    async def set_for_user(self, user_id: str, claims: List[Dict[str, Any]]) -> ApiResult:
        return await client.put(
            f"/api/custom-claims/user/{quote_segment(user_id)}", claims
        )

    async def set_for_group(
        self, group_id: str, claims: List[Dict[str, Any]]
    ) -> ApiResult:
        return await client.put(
            f"/api/custom-claims/user-group/{quote_segment(group_id)}", claims
        )


class AppConfigApi:
    """``/api/application-configuration``"""

    async def get_public(self) -> ApiResult:
        return await client.get("/api/application-configuration")

    async def get_all(self) -> ApiResult:
        return await client.get("/api/application-configuration/all")

    async def update(self, body: Dict[str, Any]) -> ApiResult:
        return await client.put("/api/application-configuration", body)

    async def test_email(self, email: Optional[str] = None) -> ApiResult:
        body = {"email": email} if email else None
        return await client.post("/api/application-configuration/test-email", body)

    async def sync_ldap(self) -> ApiResult:
        return await client.post("/api/application-configuration/sync-ldap")


class AppImagesApi:
    """``/api/application-images``"""

    async def update_logo(self, base64_data: str, mime_type: Optional[str] = None) -> ApiResult:
        return await client.put_file(
            "/api/application-images/logo", base64_data, mime_type
        )

    async def update_favicon(
        self, base64_data: str, mime_type: Optional[str] = None
    ) -> ApiResult:
        return await client.put_file(
            "/api/application-images/favicon", base64_data, mime_type
        )

    async def update_background(
        self, base64_data: str, mime_type: Optional[str] = None
    ) -> ApiResult:
        return await client.put_file(
            "/api/application-images/background", base64_data, mime_type
        )

    async def delete_default_profile_picture(self) -> ApiResult:
        return await client.delete("/api/application-images/default-profile-picture")


class SignupTokensApi:
    """``/api/signup-tokens``"""

    async def list(self, params: Pagination = None) -> ApiResult:
        return await client.get_list("/api/signup-tokens", params)

    async def create(self, body: Dict[str, Any]) -> ApiResult:
        return await client.post("/api/signup-tokens", body)

    async def delete(self, token_id: str) -> ApiResult:
        return await client.delete(f"/api/signup-tokens/{quote_segment(token_id)}")


class ScimApi:
    """``/api/scim/service-provider``"""

    async def create_provider(self, body: Dict[str, Any]) -> ApiResult:
        return await client.post("/api/scim/service-provider", body)

    async def update_provider(self, provider_id: str, body: Dict[str, Any]) -> ApiResult:
        return await client.put(
            f"/api/scim/service-provider/{quote_segment(provider_id)}", body
        )

    async def delete_provider(self, provider_id: str) -> ApiResult:
        return await client.delete(
            f"/api/scim/service-provider/{quote_segment(provider_id)}"
        )

    async def sync_provider(self, provider_id: str) -> ApiResult:
        return await client.post(
            f"/api/scim/service-provider/{quote_segment(provider_id)}/sync"
        )


class OidcDiscoveryApi:
    """``/.well-known``"""

    async def configuration(self) -> ApiResult:
        return await client.get("/.well-known/openid-configuration")

    async def jwks(self) -> ApiResult:
        return await client.get("/.well-known/jwks.json")


class UtilityApi:
    async def health_check(self) -> ApiResult:
        return await client.get("/healthz")

    async def latest_version(self) -> ApiResult:
        return await client.get("/api/version/latest")


class PocketIdApi:
    """All Pocket ID resources, one attribute per resource."""

    def __init__(self):
        self.users = UsersApi()
        self.user_groups = UserGroupsApi()
        self.oidc_clients = OidcClientsApi()
        self.api_keys = ApiKeysApi()
        self.audit_logs = AuditLogsApi()
        self.custom_claims = CustomClaimsApi()
        self.app_config = AppConfigApi()
        self.app_images = AppImagesApi()
        self.signup_tokens = SignupTokensApi()
        self.scim = ScimApi()
        self.oidc_discovery = OidcDiscoveryApi()
        self.utility = UtilityApi()


pocketid_api = PocketIdApi()
