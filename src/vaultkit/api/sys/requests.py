"""Sys engine – request records (mounts, auth methods, wrapping, health, policies)."""
from __future__ import annotations

import dataclasses
from typing import Any

from vaultkit.api.endpoint import Endpoint, body_field, endpoint, query_field
from vaultkit.api.sys.responses import (
    AuthResponse,
    ListPoliciesResponse,
    MountConfigResponse,
    MountResponse,
    ReadHealthResponse,
    ReadPolicyResponse,
    WrappingLookupResponse,
)


@dataclasses.dataclass(kw_only=True)
class EngineConfig:
    """Tuning options sent as the ``config`` object when enabling a mount."""

    default_lease_ttl: str | None = None
    max_lease_ttl: str | None = None
    force_no_cache: bool | None = None
    audit_non_hmac_request_keys: list[str] | None = None
    audit_non_hmac_response_keys: list[str] | None = None
    listing_visibility: str | None = None
    passthrough_request_headers: list[str] | None = None
    allowed_response_headers: list[str] | None = None


# ---------------------------------------------------------------------------
# Secret engine mounts
# ---------------------------------------------------------------------------

@endpoint("sys/mounts/{self.path}")
class EnableEngineRequest(Endpoint[None]):
    path: str
    engine_type: str | None = body_field(name="type", default=None)
    description: str | None = None
    config: EngineConfig | None = None
    options: dict[str, str] | None = None
    local: bool | None = None
    seal_wrap: bool | None = None


@endpoint("sys/mounts/{self.path}", method="DELETE")
class DisableEngineRequest(Endpoint[None]):
    path: str


@endpoint("sys/mounts")
class ListMountsRequest(Endpoint[dict[str, MountResponse]]):
    pass


@endpoint("sys/mounts/{self.path}/tune")
class ReadMountConfigRequest(Endpoint[MountConfigResponse]):
    path: str


# ---------------------------------------------------------------------------
# Auth methods
# ---------------------------------------------------------------------------

@endpoint("sys/auth/{self.path}")
class EnableAuthRequest(Endpoint[None]):
    path: str
    auth_type: str = body_field(name="type")
    description: str | None = None
    config: EngineConfig | None = None
    local: bool | None = None
    seal_wrap: bool | None = None


@endpoint("sys/auth/{self.path}", method="DELETE")
class DisableAuthRequest(Endpoint[None]):
    path: str


@endpoint("sys/auth")
class ListAuthsRequest(Endpoint[dict[str, AuthResponse]]):
    pass


# ---------------------------------------------------------------------------
# Response wrapping
# ---------------------------------------------------------------------------

@endpoint("sys/wrapping/lookup", method="POST")
class WrappingLookupRequest(Endpoint[WrappingLookupResponse]):
    token: str


@endpoint("sys/wrapping/unwrap", method="POST")
class UnwrapRequest(Endpoint[Any]):
    """Unwrap *token*; the payload type is that of the wrapped endpoint."""

    token: str | None = None


# ---------------------------------------------------------------------------
# Health & policies
# ---------------------------------------------------------------------------

@endpoint("sys/health")
class ReadHealthRequest(Endpoint[ReadHealthResponse]):
    standbyok: bool | None = query_field(default=None)
    perfstandbyok: bool | None = query_field(default=None)


@endpoint("sys/policies/acl/{self.name}")
class SetPolicyRequest(Endpoint[None]):
    name: str
    policy: str


@endpoint("sys/policies/acl/{self.name}")
class ReadPolicyRequest(Endpoint[ReadPolicyResponse]):
    name: str


@endpoint("sys/policies/acl/{self.name}", method="DELETE")
class DeletePolicyRequest(Endpoint[None]):
    name: str


@endpoint("sys/policies/acl", method="LIST")
class ListPoliciesRequest(Endpoint[ListPoliciesResponse]):
    pass


__all__ = [
    "DeletePolicyRequest",
    "DisableAuthRequest",
    "DisableEngineRequest",
    "EnableAuthRequest",
    "EnableEngineRequest",
    "EngineConfig",
    "ListAuthsRequest",
    "ListMountsRequest",
    "ListPoliciesRequest",
    "ReadHealthRequest",
    "ReadMountConfigRequest",
    "ReadPolicyRequest",
    "SetPolicyRequest",
    "UnwrapRequest",
    "WrappingLookupRequest",
]
