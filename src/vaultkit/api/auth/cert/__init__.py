"""TLS certificate auth method."""
from vaultkit.api.auth.cert.requests import (
    CreateCaCertificateRoleRequest,
    DeleteCaCertificateRoleRequest,
    ListCaCertificateRoleRequest,
    LoginRequest,
    ReadCaCertificateRoleRequest,
)
from vaultkit.api.auth.cert.responses import (
    ListCaCertificateRoleResponse,
    ReadCaCertificateRoleResponse,
)

__all__ = [
    "CreateCaCertificateRoleRequest",
    "DeleteCaCertificateRoleRequest",
    "ListCaCertificateRoleRequest",
    "ListCaCertificateRoleResponse",
    "LoginRequest",
    "ReadCaCertificateRoleRequest",
    "ReadCaCertificateRoleResponse",
]
