"""Sys engine – mounts, auth methods, wrapping, health and ACL policies."""
from vaultkit.api.sys.requests import (
    DeletePolicyRequest,
    DisableAuthRequest,
    DisableEngineRequest,
    EnableAuthRequest,
    EnableEngineRequest,
    EngineConfig,
    ListAuthsRequest,
    ListMountsRequest,
    ListPoliciesRequest,
    ReadHealthRequest,
    ReadMountConfigRequest,
    ReadPolicyRequest,
    SetPolicyRequest,
    UnwrapRequest,
    WrappingLookupRequest,
)
from vaultkit.api.sys.responses import (
    AuthResponse,
    MountResponse,
    ReadHealthResponse,
    ReadPolicyResponse,
    ServerStatus,
    WrappingLookupResponse,
)

__all__ = [
    "AuthResponse",
    "DeletePolicyRequest",
    "DisableAuthRequest",
    "DisableEngineRequest",
    "EnableAuthRequest",
    "EnableEngineRequest",
    "EngineConfig",
    "ListAuthsRequest",
    "ListMountsRequest",
    "ListPoliciesRequest",
    "MountResponse",
    "ReadHealthRequest",
    "ReadHealthResponse",
    "ReadMountConfigRequest",
    "ReadPolicyRequest",
    "ReadPolicyResponse",
    "ServerStatus",
    "SetPolicyRequest",
    "UnwrapRequest",
    "WrappingLookupRequest",
    "WrappingLookupResponse",
]
