"""JWT/OIDC auth method."""
from vaultkit.api.auth.oidc.requests import (
    DeleteRoleRequest,
    JWTLoginRequest,
    ListRolesRequest,
    OIDCAuthRequest,
    OIDCCallbackRequest,
    ReadConfigurationRequest,
    ReadRoleRequest,
    SetConfigurationRequest,
    SetRoleRequest,
)
from vaultkit.api.auth.oidc.responses import (
    ListRolesResponse,
    OIDCAuthResponse,
    ReadConfigurationResponse,
    ReadRoleResponse,
)

__all__ = [
    "DeleteRoleRequest",
    "JWTLoginRequest",
    "ListRolesRequest",
    "ListRolesResponse",
    "OIDCAuthRequest",
    "OIDCAuthResponse",
    "OIDCCallbackRequest",
    "ReadConfigurationRequest",
    "ReadConfigurationResponse",
    "ReadRoleRequest",
    "ReadRoleResponse",
    "SetConfigurationRequest",
    "SetRoleRequest",
]
