"""Login – JWT (non-interactive) against a jwt/oidc mount."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from vaultkit.api.auth.oidc import JWTLoginRequest
from vaultkit.api.envelope import AuthInfo

if TYPE_CHECKING:
    from vaultkit.client import VaultClient


@dataclasses.dataclass(frozen=True)
class JWTLogin:
    jwt: str = dataclasses.field(repr=False)
    role: str | None = None

    async def login(self, client: VaultClient, mount: str) -> AuthInfo:
        return await client.auth(JWTLoginRequest(mount=mount, jwt=self.jwt, role=self.role))


__all__ = ["JWTLogin"]
