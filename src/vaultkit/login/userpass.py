"""Login – username & password."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from vaultkit.api.auth.userpass import LoginRequest
from vaultkit.api.envelope import AuthInfo

if TYPE_CHECKING:
    from vaultkit.client import VaultClient


@dataclasses.dataclass(frozen=True)
class UserpassLogin:
    username: str
    password: str = dataclasses.field(repr=False)

    async def login(self, client: VaultClient, mount: str) -> AuthInfo:
        return await client.auth(
            LoginRequest(mount=mount, username=self.username, password=self.password)
        )


__all__ = ["UserpassLogin"]
