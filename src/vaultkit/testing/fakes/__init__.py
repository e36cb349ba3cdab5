"""Testing fakes – in-memory doubles for the Vault HTTP API."""
from vaultkit.testing.fakes.vault import FakeVault, VaultFailure

__all__ = ["FakeVault", "VaultFailure"]
