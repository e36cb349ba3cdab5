"""Config settings – client settings resolved from code and environment."""
from vaultkit.config.settings.base import Settings
from vaultkit.config.settings.client import (
    ClientIdentity,
    VaultClientSettings,
    VaultClientSettingsBuilder,
)
from vaultkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader, VaultEnvironment

__all__ = [
    "ClientIdentity",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "VaultClientSettings",
    "VaultClientSettingsBuilder",
    "VaultEnvironment",
]
