"""JWT/OIDC auth – request records.

The browser flow is two requests: ``oidc/auth_url`` yields the provider URL
and ``oidc/callback`` exchanges the ``state``/``nonce``/``code`` triple the
provider redirected back with for a token.
"""
from __future__ import annotations

from typing import Any

from vaultkit.api.auth.oidc.responses import (
    ListRolesResponse,
    OIDCAuthResponse,
    ReadConfigurationResponse,
    ReadRoleResponse,
)
from vaultkit.api.endpoint import Endpoint, endpoint, query_field


@endpoint("auth/{self.mount}/config")
class SetConfigurationRequest(Endpoint[None]):
    mount: str
    oidc_discovery_url: str | None = None
    oidc_discovery_ca_pem: str | None = None
    oidc_client_id: str | None = None
    oidc_client_secret: str | None = None
    oidc_response_mode: str | None = None
    oidc_response_types: list[str] | None = None
    jwks_url: str | None = None
    jwks_ca_pem: str | None = None
    jwt_validation_pubkeys: list[str] | None = None
    bound_issuer: str | None = None
    jwt_supported_algs: list[str] | None = None
    default_role: str | None = None
    provider_config: dict[str, Any] | None = None
    namespace_in_state: bool | None = None


@endpoint("auth/{self.mount}/config")
class ReadConfigurationRequest(Endpoint[ReadConfigurationResponse]):
    mount: str


@endpoint("auth/{self.mount}/role/{self.name}")
class SetRoleRequest(Endpoint[None]):
    mount: str
    name: str
    user_claim: str
    role_type: str | None = None
    allowed_redirect_uris: list[str] | None = None
    bound_audiences: list[str] | None = None
    bound_subject: str | None = None
    bound_claims: dict[str, Any] | None = None
    bound_claims_type: str | None = None
    claim_mappings: dict[str, str] | None = None
    groups_claim: str | None = None
    oidc_scopes: list[str] | None = None
    verbose_oidc_logging: bool | None = None
    max_age: str | None = None
    token_bound_cidrs: list[str] | None = None
    token_explicit_max_ttl: str | None = None
    token_max_ttl: str | None = None
    token_no_default_policy: bool | None = None
    token_num_uses: int | None = None
    token_period: str | None = None
    token_policies: list[str] | None = None
    token_ttl: str | None = None
    token_type: str | None = None


@endpoint("auth/{self.mount}/role/{self.name}")
class ReadRoleRequest(Endpoint[ReadRoleResponse]):
    mount: str
    name: str


@endpoint("auth/{self.mount}/role/{self.name}", method="DELETE")
class DeleteRoleRequest(Endpoint[None]):
    mount: str
    name: str


@endpoint("auth/{self.mount}/role", method="LIST")
class ListRolesRequest(Endpoint[ListRolesResponse]):
    mount: str


@endpoint("auth/{self.mount}/oidc/auth_url")
class OIDCAuthRequest(Endpoint[OIDCAuthResponse]):
    mount: str
    redirect_uri: str
    role: str | None = None
    client_nonce: str | None = None


@endpoint("auth/{self.mount}/oidc/callback")
class OIDCCallbackRequest(Endpoint[None]):
    mount: str
    state: str = query_field()
    nonce: str = query_field()
    code: str = query_field()
    client_nonce: str | None = query_field(default=None)


@endpoint("auth/{self.mount}/login")
class JWTLoginRequest(Endpoint[None]):
    mount: str
    jwt: str
    role: str | None = None


__all__ = [
    "DeleteRoleRequest",
    "JWTLoginRequest",
    "ListRolesRequest",
    "OIDCAuthRequest",
    "OIDCCallbackRequest",
    "ReadConfigurationRequest",
    "ReadRoleRequest",
    "SetConfigurationRequest",
    "SetRoleRequest",
]
