"""Testing support – in-memory doubles for exercising code that talks to Vault.

Usage::

    from vaultkit.testing import FakeVault

    vault = FakeVault()
    async with vault.client() as client:
        ...
"""

from vaultkit.testing.fakes import FakeVault

__all__ = ["FakeVault"]
