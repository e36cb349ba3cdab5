"""KV v1 helpers."""
from __future__ import annotations

from typing import Any

from vaultkit.api.envelope import decode_as
from vaultkit.api.kv1 import DeleteSecretRequest, GetSecretRequest, ListSecretRequest, SetSecretRequest
from vaultkit.client import VaultClient


async def set(client: VaultClient, mount: str, path: str, data: dict[str, Any]) -> None:  # noqa: A001
    """Replace the secret at *path* with *data*."""
    await client.execute_empty(SetSecretRequest(mount=mount, path=path, data=data))


async def get(client: VaultClient, mount: str, path: str, as_type: Any = None) -> Any:
    data = await client.execute(GetSecretRequest(mount=mount, path=path))
    return data if as_type is None else decode_as(data, as_type)


async def list(client: VaultClient, mount: str, path: str) -> list[str]:  # noqa: A001
    response = await client.execute(ListSecretRequest(mount=mount, path=path))
    return response.keys


async def delete(client: VaultClient, mount: str, path: str) -> None:
    await client.execute_empty(DeleteSecretRequest(mount=mount, path=path))


__all__ = ["delete", "get", "list", "set"]
