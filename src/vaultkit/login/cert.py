"""Login – TLS client certificate.

The certificate itself is the client identity configured on
:class:`~vaultkit.config.settings.VaultClientSettings`.
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from vaultkit.api.auth.cert import LoginRequest
from vaultkit.api.envelope import AuthInfo

if TYPE_CHECKING:
    from vaultkit.client import VaultClient


@dataclasses.dataclass(frozen=True)
class CertLogin:
    name: str | None = None

    async def login(self, client: VaultClient, mount: str) -> AuthInfo:
        return await client.auth(LoginRequest(mount=mount, name=self.name))


__all__ = ["CertLogin"]
