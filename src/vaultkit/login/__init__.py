"""Login – strategies converting credentials into a session token."""
from vaultkit.login.approle import AppRoleLogin
from vaultkit.login.cert import CertLogin
from vaultkit.login.core import LoginMethod, MultiLoginCallback, MultiLoginMethod
from vaultkit.login.jwt import JWTLogin
from vaultkit.login.kubernetes import KubernetesLogin
from vaultkit.login.method import Method, default_mount, list_methods, list_supported
from vaultkit.login.oidc import OIDCCallback, OIDCCallbackError, OIDCLogin
from vaultkit.login.userpass import UserpassLogin

__all__ = [
    "AppRoleLogin",
    "CertLogin",
    "JWTLogin",
    "KubernetesLogin",
    "LoginMethod",
    "Method",
    "MultiLoginCallback",
    "MultiLoginMethod",
    "OIDCCallback",
    "OIDCCallbackError",
    "OIDCLogin",
    "UserpassLogin",
    "default_mount",
    "list_methods",
    "list_supported",
]
