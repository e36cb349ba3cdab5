"""AppRole auth – response models."""
from __future__ import annotations

from pydantic import BaseModel, Field

from vaultkit.api.common import KeysResponse


class ReadAppRoleResponse(BaseModel):
    bind_secret_id: bool = True
    local_secret_ids: bool = False
    secret_id_bound_cidrs: list[str] | None = None
    secret_id_num_uses: int = 0
    secret_id_ttl: int = 0
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


class ReadRoleIDResponse(BaseModel):
    role_id: str


class GenerateNewSecretIDResponse(BaseModel):
    secret_id: str = Field(repr=False)
    secret_id_accessor: str
    secret_id_num_uses: int = 0
    secret_id_ttl: int = 0


class ReadSecretIDResponse(BaseModel):
    cidr_list: list[str] = Field(default_factory=list)
    creation_time: str
    expiration_time: str
    last_updated_time: str
    metadata: dict[str, str] | None = None
    secret_id_accessor: str
    secret_id_num_uses: int = 0
    secret_id_ttl: int = 0
    token_bound_cidrs: list[str] = Field(default_factory=list)


class ListSecretIDResponse(KeysResponse):
    pass


__all__ = [
    "GenerateNewSecretIDResponse",
    "ListRolesResponse",
    "ListSecretIDResponse",
    "ReadAppRoleResponse",
    "ReadRoleIDResponse",
    "ReadSecretIDResponse",
]
