"""Login – AppRole."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from vaultkit.api.auth.approle import LoginWithAppRoleRequest
from vaultkit.api.envelope import AuthInfo

if TYPE_CHECKING:
    from vaultkit.client import VaultClient


@dataclasses.dataclass(frozen=True)
class AppRoleLogin:
    role_id: str
    secret_id: str = dataclasses.field(repr=False)

    async def login(self, client: VaultClient, mount: str) -> AuthInfo:
        return await client.auth(
            LoginWithAppRoleRequest(mount=mount, role_id=self.role_id, secret_id=self.secret_id)
        )


__all__ = ["AppRoleLogin"]
