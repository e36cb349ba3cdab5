"""Kubernetes auth – response models."""
from __future__ import annotations

from pydantic import BaseModel, Field

from vaultkit.api.common import KeysResponse


class ReadKubernetesAuthConfigResponse(BaseModel):
    kubernetes_host: str
    kubernetes_ca_cert: str = ""
    pem_keys: list[str] = Field(default_factory=list)
    issuer: str = ""
    disable_iss_validation: bool = True
    disable_local_ca_jwt: bool = False


class ReadKubernetesRoleResponse(BaseModel):
    bound_service_account_names: list[str] = Field(default_factory=list)
    bound_service_account_namespaces: list[str] = Field(default_factory=list)
    audience: str = ""
    token_bound_cidrs: list[str] = Field(default_factory=list)
    token_explicit_max_ttl: int = 0
    token_max_ttl: int = 0
    token_no_default_policy: bool = False
    token_num_uses: int = 0
    token_period: int = 0
    token_policies: list[str] = Field(default_factory=list)
    token_ttl: int = 0
    token_type: str = "default"


class ListRolesResponse(KeysResponse):
    pass


__all__ = ["ListRolesResponse", "ReadKubernetesAuthConfigResponse", "ReadKubernetesRoleResponse"]
