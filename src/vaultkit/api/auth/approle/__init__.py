"""AppRole auth method."""
from vaultkit.api.auth.approle.requests import (
    CreateCustomSecretIDRequest,
    DeleteAppRoleRequest,
    DeleteSecretIDRequest,
    GenerateNewSecretIDRequest,
    ListRolesRequest,
    ListSecretIDRequest,
    LoginWithAppRoleRequest,
    ReadAppRoleRequest,
    ReadRoleIDRequest,
    ReadSecretIDRequest,
    SetAppRoleRequest,
    TidyRequest,
    UpdateRoleIDRequest,
)
from vaultkit.api.auth.approle.responses import (
    GenerateNewSecretIDResponse,
    ListRolesResponse,
    ListSecretIDResponse,
    ReadAppRoleResponse,
    ReadRoleIDResponse,
    ReadSecretIDResponse,
)

__all__ = [
    "CreateCustomSecretIDRequest",
    "DeleteAppRoleRequest",
    "DeleteSecretIDRequest",
    "GenerateNewSecretIDRequest",
    "GenerateNewSecretIDResponse",
    "ListRolesRequest",
    "ListRolesResponse",
    "ListSecretIDRequest",
    "ListSecretIDResponse",
    "LoginWithAppRoleRequest",
    "ReadAppRoleRequest",
    "ReadAppRoleResponse",
    "ReadRoleIDRequest",
    "ReadRoleIDResponse",
    "ReadSecretIDRequest",
    "ReadSecretIDResponse",
    "SetAppRoleRequest",
    "TidyRequest",
    "UpdateRoleIDRequest",
]
