"""Sys engine – response models."""
from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from vaultkit.api.common import KeysResponse


class MountConfigResponse(BaseModel):
    default_lease_ttl: int = 0
    force_no_cache: bool = False
    max_lease_ttl: int = 0


class MountResponse(BaseModel):
    """One entry of ``GET sys/mounts`` (secret engines)."""

    model_config = ConfigDict(populate_by_name=True)

    accessor: str = ""
    config: MountConfigResponse = Field(default_factory=MountConfigResponse)
    description: str = ""
    external_entropy_access: bool = False
    local: bool = False
    options: dict[str, str] | None = None
    seal_wrap: bool = False
    mount_type: str = Field(default="", alias="type")
    uuid: str = ""


class AuthConfigResponse(BaseModel):
    default_lease_ttl: int = 0
    force_no_cache: bool = False
    max_lease_ttl: int = 0
    token_type: str = ""


class AuthResponse(BaseModel):
    """One entry of ``GET sys/auth`` (auth methods)."""

    model_config = ConfigDict(populate_by_name=True)

    accessor: str = ""
    config: AuthConfigResponse = Field(default_factory=AuthConfigResponse)
    description: str = ""
    external_entropy_access: bool = False
    local: bool = False
    options: dict[str, str] | None = None
    seal_wrap: bool = False
    auth_type: str = Field(default="", alias="type")
    uuid: str = ""


class WrappingLookupResponse(BaseModel):
    creation_path: str
    creation_time: str
    creation_ttl: int


class ReadHealthResponse(BaseModel):
    """Body of ``GET sys/health``; it is not wrapped in an envelope."""

    cluster_id: str | None = None
    cluster_name: str | None = None
    initialized: bool
    performance_standby: bool = False
    replication_dr_mode: str | None = None
    replication_performance_mode: str | None = None
    sealed: bool
    server_time_utc: int = 0
    standby: bool = False
    version: str = ""


class ReadPolicyResponse(BaseModel):
    name: str
    policy: str


class ListPoliciesResponse(KeysResponse):
    pass


class ServerStatus(str, enum.Enum):
    """Server state derived from the ``sys/health`` status code."""

    OK = "ok"
    PERFSTANDBY = "perfstandby"
    RECOVERY = "recovery"
    SEALED = "sealed"
    STANDBY = "standby"
    UNINITIALIZED = "uninitialized"
    UNKNOWN = "unknown"

    @classmethod
    def from_status_code(cls, status: int) -> ServerStatus:
        return _HEALTH_CODES.get(status, cls.UNKNOWN)


_HEALTH_CODES = {
    200: ServerStatus.OK,
    429: ServerStatus.STANDBY,
    472: ServerStatus.RECOVERY,
    473: ServerStatus.PERFSTANDBY,
    501: ServerStatus.UNINITIALIZED,
    503: ServerStatus.SEALED,
}


__all__ = [
    "AuthConfigResponse",
    "AuthResponse",
    "ListPoliciesResponse",
    "MountConfigResponse",
    "MountResponse",
    "ReadHealthResponse",
    "ReadPolicyResponse",
    "ServerStatus",
    "WrappingLookupResponse",
]
