"""Kubernetes auth method."""
from vaultkit.api.auth.kubernetes.requests import (
    ConfigureKubernetesAuthRequest,
    CreateKubernetesRoleRequest,
    DeleteKubernetesRoleRequest,
    ListRolesRequest,
    LoginWithKubernetesRequest,
    ReadKubernetesAuthConfigRequest,
    ReadKubernetesRoleRequest,
)
from vaultkit.api.auth.kubernetes.responses import (
    ListRolesResponse,
    ReadKubernetesAuthConfigResponse,
    ReadKubernetesRoleResponse,
)

__all__ = [
    "ConfigureKubernetesAuthRequest",
    "CreateKubernetesRoleRequest",
    "DeleteKubernetesRoleRequest",
    "ListRolesRequest",
    "ListRolesResponse",
    "LoginWithKubernetesRequest",
    "ReadKubernetesAuthConfigRequest",
    "ReadKubernetesAuthConfigResponse",
    "ReadKubernetesRoleRequest",
    "ReadKubernetesRoleResponse",
]
