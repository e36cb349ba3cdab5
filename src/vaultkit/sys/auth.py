"""Sys helpers – auth method mounts."""
from __future__ import annotations

from typing import Any

from vaultkit.api.sys import AuthResponse, DisableAuthRequest, EnableAuthRequest, ListAuthsRequest
from vaultkit.client import VaultClient


async def enable(client: VaultClient, path: str, auth_type: str, **options: Any) -> None:
    await client.execute_empty(EnableAuthRequest(path=path, auth_type=auth_type, **options))


async def disable(client: VaultClient, path: str) -> None:
    await client.execute_empty(DisableAuthRequest(path=path))


async def list(client: VaultClient) -> dict[str, AuthResponse]:  # noqa: A001
    return await client.execute(ListAuthsRequest())


__all__ = ["disable", "enable", "list"]
