"""Config – client settings and environment loading."""
from vaultkit.config.settings import (
    ClientIdentity,
    VaultClientSettings,
    VaultClientSettingsBuilder,
)

__all__ = ["ClientIdentity", "VaultClientSettings", "VaultClientSettingsBuilder"]
