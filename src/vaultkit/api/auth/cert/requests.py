"""TLS certificate auth – request records.

Logging in presents the client identity configured on the transport; the
request body only names the role to match against.
"""
from __future__ import annotations

from vaultkit.api.auth.cert.responses import (
    ListCaCertificateRoleResponse,
    ReadCaCertificateRoleResponse,
)
from vaultkit.api.endpoint import Endpoint, endpoint


@endpoint("auth/{self.mount}/login", method="POST")
class LoginRequest(Endpoint[None]):
    mount: str
    name: str | None = None


@endpoint("auth/{self.mount}/certs/{self.name}")
class CreateCaCertificateRoleRequest(Endpoint[None]):
    mount: str
    name: str
    certificate: str
    allowed_common_names: list[str] | None = None
    allowed_dns_sans: list[str] | None = None
    allowed_email_sans: list[str] | None = None
    allowed_uri_sans: list[str] | None = None
    allowed_organizational_units: list[str] | None = None
    display_name: str | None = None
    token_bound_cidrs: list[str] | None = None
    token_explicit_max_ttl: str | None = None
    token_max_ttl: str | None = None
    token_no_default_policy: bool | None = None
    token_num_uses: int | None = None
    token_period: str | None = None
    token_policies: list[str] | None = None
    token_ttl: str | None = None
    token_type: str | None = None


@endpoint("auth/{self.mount}/certs/{self.name}")
class ReadCaCertificateRoleRequest(Endpoint[ReadCaCertificateRoleResponse]):
    mount: str
    name: str


@endpoint("auth/{self.mount}/certs/{self.name}", method="DELETE")
class DeleteCaCertificateRoleRequest(Endpoint[None]):
    mount: str
    name: str


@endpoint("auth/{self.mount}/certs", method="LIST")
class ListCaCertificateRoleRequest(Endpoint[ListCaCertificateRoleResponse]):
    mount: str


__all__ = [
    "CreateCaCertificateRoleRequest",
    "DeleteCaCertificateRoleRequest",
    "ListCaCertificateRoleRequest",
    "LoginRequest",
    "ReadCaCertificateRoleRequest",
]
