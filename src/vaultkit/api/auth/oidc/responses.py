"""JWT/OIDC auth – response models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from vaultkit.api.common import KeysResponse


class OIDCAuthResponse(BaseModel):
    """The provider URL the user's browser must visit."""

    auth_url: str


class ReadConfigurationResponse(BaseModel):
    bound_issuer: str = ""
    default_role: str = ""
    jwks_ca_pem: str = ""
    jwks_url: str = ""
    jwt_supported_algs: list[str] = Field(default_factory=list)
    jwt_validation_pubkeys: list[str] = Field(default_factory=list)
    namespace_in_state: bool = False
    oidc_client_id: str = ""
    oidc_discovery_ca_pem: str = ""
    oidc_discovery_url: str = ""
    oidc_response_mode: str = ""
    oidc_response_types: list[str] = Field(default_factory=list)
    provider_config: dict[str, Any] | None = None


class ReadRoleResponse(BaseModel):
    allowed_redirect_uris: list[str] = Field(default_factory=list)
    bound_audiences: list[str] | None = None
    bound_claims: dict[str, Any] | None = None
    bound_claims_type: str = "string"
    bound_subject: str = ""
    claim_mappings: dict[str, str] | None = None
    clock_skew_leeway: int = 0
    expiration_leeway: int = 0
    groups_claim: str = ""
    max_age: int = 0
    not_before_leeway: int = 0
    oidc_scopes: list[str] | None = None
    role_type: str = ""
    token_bound_cidrs: list[str] = Field(default_factory=list)
    token_explicit_max_ttl: int = 0
    token_max_ttl: int = 0
    token_no_default_policy: bool = False
    token_num_uses: int = 0
    token_period: int = 0
    token_policies: list[str] = Field(default_factory=list)
    token_ttl: int = 0
    token_type: str = "default"
    user_claim: str = ""
    verbose_oidc_logging: bool = False


class ListRolesResponse(KeysResponse):
    pass


__all__ = [
    "ListRolesResponse",
    "OIDCAuthResponse",
    "ReadConfigurationResponse",
    "ReadRoleResponse",
]
