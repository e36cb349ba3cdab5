"""
vaultkit – async client for the HashiCorp Vault HTTP API.

Import path convention::

    from vaultkit.client import VaultClient
    from vaultkit.config.settings import VaultClientSettingsBuilder
    from vaultkit.login import AppRoleLogin, OIDCLogin
    from vaultkit.api.kv2 import ReadSecretRequest
    from vaultkit import kv2, sys, token
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
