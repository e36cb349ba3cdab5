"""Kubernetes auth – request records."""
from __future__ import annotations

from vaultkit.api.auth.kubernetes.responses import (
    ListRolesResponse,
    ReadKubernetesAuthConfigResponse,
    ReadKubernetesRoleResponse,
)
from vaultkit.api.endpoint import Endpoint, endpoint


@endpoint("auth/{self.mount}/config")
class ConfigureKubernetesAuthRequest(Endpoint[None]):
    mount: str
    kubernetes_host: str
    kubernetes_ca_cert: str | None = None
    token_reviewer_jwt: str | None = None
    pem_keys: list[str] | None = None
    issuer: str | None = None
    disable_iss_validation: bool | None = None
    disable_local_ca_jwt: bool | None = None


@endpoint("auth/{self.mount}/config")
class ReadKubernetesAuthConfigRequest(Endpoint[ReadKubernetesAuthConfigResponse]):
    mount: str


@endpoint("auth/{self.mount}/login")
class LoginWithKubernetesRequest(Endpoint[None]):
    mount: str
    role: str
    jwt: str


@endpoint("auth/{self.mount}/role", method="LIST")
class ListRolesRequest(Endpoint[ListRolesResponse]):
    mount: str


@endpoint("auth/{self.mount}/role/{self.name}")
class CreateKubernetesRoleRequest(Endpoint[None]):
    mount: str
    name: str
    bound_service_account_names: list[str]
    bound_service_account_namespaces: list[str]
    audience: str | None = None
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
class ReadKubernetesRoleRequest(Endpoint[ReadKubernetesRoleResponse]):
    mount: str
    name: str


@endpoint("auth/{self.mount}/role/{self.name}", method="DELETE")
class DeleteKubernetesRoleRequest(Endpoint[None]):
    mount: str
    name: str


__all__ = [
    "ConfigureKubernetesAuthRequest",
    "CreateKubernetesRoleRequest",
    "DeleteKubernetesRoleRequest",
    "ListRolesRequest",
    "LoginWithKubernetesRequest",
    "ReadKubernetesAuthConfigRequest",
    "ReadKubernetesRoleRequest",
]
