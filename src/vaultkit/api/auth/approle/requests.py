"""AppRole auth – request records."""
from __future__ import annotations

from vaultkit.api.auth.approle.responses import (
    GenerateNewSecretIDResponse,
    ListRolesResponse,
    ListSecretIDResponse,
    ReadAppRoleResponse,
    ReadRoleIDResponse,
    ReadSecretIDResponse,
)
from vaultkit.api.endpoint import Endpoint, endpoint


@endpoint("auth/{self.mount}/login")
class LoginWithAppRoleRequest(Endpoint[None]):
    mount: str
    role_id: str
    secret_id: str | None = None


@endpoint("auth/{self.mount}/role", method="LIST")
class ListRolesRequest(Endpoint[ListRolesResponse]):
    mount: str


@endpoint("auth/{self.mount}/role/{self.role_name}")
class SetAppRoleRequest(Endpoint[None]):
    mount: str
    role_name: str
    bind_secret_id: bool | None = None
    secret_id_bound_cidrs: list[str] | None = None
    secret_id_num_uses: int | None = None
    secret_id_ttl: str | None = None
    local_secret_ids: bool | None = None
    token_ttl: str | None = None
    token_max_ttl: str | None = None
    token_policies: list[str] | None = None
    token_bound_cidrs: list[str] | None = None
    token_explicit_max_ttl: str | None = None
    token_no_default_policy: bool | None = None
    token_num_uses: int | None = None
    token_period: str | None = None
    token_type: str | None = None


@endpoint("auth/{self.mount}/role/{self.role_name}")
class ReadAppRoleRequest(Endpoint[ReadAppRoleResponse]):
    mount: str
    role_name: str


@endpoint("auth/{self.mount}/role/{self.role_name}", method="DELETE")
class DeleteAppRoleRequest(Endpoint[None]):
    mount: str
    role_name: str


@endpoint("auth/{self.mount}/role/{self.role_name}/role-id")
class ReadRoleIDRequest(Endpoint[ReadRoleIDResponse]):
    mount: str
    role_name: str


@endpoint("auth/{self.mount}/role/{self.role_name}/role-id")
class UpdateRoleIDRequest(Endpoint[None]):
    mount: str
    role_name: str
    role_id: str


@endpoint("auth/{self.mount}/role/{self.role_name}/secret-id")
class GenerateNewSecretIDRequest(Endpoint[GenerateNewSecretIDResponse]):
    mount: str
    role_name: str
    metadata: str | None = None
    cidr_list: list[str] | None = None
    token_bound_cidrs: list[str] | None = None


@endpoint("auth/{self.mount}/role/{self.role_name}/custom-secret-id")
class CreateCustomSecretIDRequest(Endpoint[GenerateNewSecretIDResponse]):
    mount: str
    role_name: str
    secret_id: str
    metadata: str | None = None
    cidr_list: list[str] | None = None
    token_bound_cidrs: list[str] | None = None


@endpoint("auth/{self.mount}/role/{self.role_name}/secret-id", method="LIST")
class ListSecretIDRequest(Endpoint[ListSecretIDResponse]):
    mount: str
    role_name: str


@endpoint("auth/{self.mount}/role/{self.role_name}/secret-id/lookup")
class ReadSecretIDRequest(Endpoint[ReadSecretIDResponse]):
    mount: str
    role_name: str
    secret_id: str


@endpoint("auth/{self.mount}/role/{self.role_name}/secret-id/destroy")
class DeleteSecretIDRequest(Endpoint[None]):
    mount: str
    role_name: str
    secret_id: str


@endpoint("auth/{self.mount}/tidy/secret-id", method="POST")
class TidyRequest(Endpoint[None]):
    mount: str


__all__ = [
    "CreateCustomSecretIDRequest",
    "DeleteAppRoleRequest",
    "DeleteSecretIDRequest",
    "GenerateNewSecretIDRequest",
    "ListRolesRequest",
    "ListSecretIDRequest",
    "LoginWithAppRoleRequest",
    "ReadAppRoleRequest",
    "ReadRoleIDRequest",
    "ReadSecretIDRequest",
    "SetAppRoleRequest",
    "TidyRequest",
    "UpdateRoleIDRequest",
]
