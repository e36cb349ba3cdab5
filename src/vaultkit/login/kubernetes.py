"""Login – Kubernetes service account token."""
from __future__ import annotations

import dataclasses
import pathlib
from typing import TYPE_CHECKING

from vaultkit.api.auth.kubernetes import LoginWithKubernetesRequest
from vaultkit.api.envelope import AuthInfo

if TYPE_CHECKING:
    from vaultkit.client import VaultClient

SERVICE_ACCOUNT_TOKEN_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/token"


@dataclasses.dataclass(frozen=True)
class KubernetesLogin:
    role: str
    jwt: str = dataclasses.field(repr=False)

    @classmethod
    def from_service_account(
        cls, role: str, token_path: str = SERVICE_ACCOUNT_TOKEN_PATH
    ) -> KubernetesLogin:
        """Read the pod's projected service account token."""
        return cls(role=role, jwt=pathlib.Path(token_path).read_text().strip())

    async def login(self, client: VaultClient, mount: str) -> AuthInfo:
        return await client.auth(LoginWithKubernetesRequest(mount=mount, role=self.role, jwt=self.jwt))


__all__ = ["KubernetesLogin", "SERVICE_ACCOUNT_TOKEN_PATH"]
