"""Login – auth method types and discovery of the methods enabled on a server."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from vaultkit.api.sys import ListAuthsRequest
from vaultkit.kernel.errors import InvalidLoginMethodError

if TYPE_CHECKING:
    from vaultkit.client import VaultClient


class Method(str, enum.Enum):
    """Auth method types as reported in the ``type`` field of ``sys/auth``."""

    ALICLOUD = "alicloud"
    APPROLE = "approle"
    AWS = "aws"
    AZURE = "azure"
    CERT = "cert"
    CF = "cf"
    GCP = "gcp"
    GITHUB = "github"
    JWT = "jwt"
    KERBEROS = "kerberos"
    KUBERNETES = "kubernetes"
    LDAP = "ldap"
    OCI = "oci"
    OIDC = "oidc"
    OKTA = "okta"
    RADIUS = "radius"
    TOKEN = "token"
    USERPASS = "userpass"

    @classmethod
    def parse(cls, value: str) -> Method:
        try:
            return cls(value.lower())
        except ValueError as exc:
            raise InvalidLoginMethodError(value, cause=exc) from exc

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def default_mount(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {
    Method.ALICLOUD: "AliCloud",
    Method.APPROLE: "AppRole",
    Method.AWS: "AWS",
    Method.AZURE: "Azure",
    Method.CERT: "TLS Certificates",
    Method.CF: "Cloud Foundry",
    Method.GCP: "Google Cloud",
    Method.GITHUB: "Github",
    Method.JWT: "JWT",
    Method.KERBEROS: "Kerberos",
    Method.KUBERNETES: "Kubernetes",
    Method.LDAP: "LDAP",
    Method.OCI: "Oracle Cloud Infrastructure",
    Method.OIDC: "OpenID Connect",
    Method.OKTA: "Okta",
    Method.RADIUS: "RADIUS",
    Method.TOKEN: "Token",
    Method.USERPASS: "Username/Password",
}

SUPPORTED_METHODS = frozenset(
    {
        Method.APPROLE,
        Method.CERT,
        Method.JWT,
        Method.KUBERNETES,
        Method.OIDC,
        Method.USERPASS,
    }
)


def default_mount(method: Method | str) -> str:
    """Mount path a method is enabled at when none is given."""
    return (method if isinstance(method, Method) else Method.parse(method)).default_mount


async def list_methods(client: VaultClient) -> dict[str, Method]:
    """Map each enabled auth mount (without trailing ``/``) to its method.

    Raises :class:`InvalidLoginMethodError` for a mount of unknown type.
    """
    mounts = await client.execute(ListAuthsRequest())
    return {path.rstrip("/"): Method.parse(mount.auth_type) for path, mount in mounts.items()}


async def list_supported(client: VaultClient) -> dict[str, Method]:
    """Like :func:`list_methods` but keeps only the methods this library logs in with.

    Mounts of a type this library does not know are skipped.
    """
    mounts = await client.execute(ListAuthsRequest())
    supported: dict[str, Method] = {}
    for path, mount in mounts.items():
        try:
            method = Method.parse(mount.auth_type)
        except InvalidLoginMethodError:
            continue
        if method in SUPPORTED_METHODS:
            supported[path.rstrip("/")] = method
    return supported


__all__ = [
    "Method",
    "SUPPORTED_METHODS",
    "default_mount",
    "list_methods",
    "list_supported",
]
