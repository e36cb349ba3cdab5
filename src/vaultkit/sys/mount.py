"""Sys helpers – secret engine mounts."""
from __future__ import annotations

from typing import Any

from vaultkit.api.sys import (
    DisableEngineRequest,
    EnableEngineRequest,
    ListMountsRequest,
    MountResponse,
    ReadMountConfigRequest,
)
from vaultkit.api.sys.responses import MountConfigResponse
from vaultkit.client import VaultClient


async def enable(client: VaultClient, path: str, engine_type: str, **options: Any) -> None:
    """Mount an engine of *engine_type* at *path*; *options* are ``EnableEngineRequest`` fields."""
    await client.execute_empty(EnableEngineRequest(path=path, engine_type=engine_type, **options))


async def disable(client: VaultClient, path: str) -> None:
    await client.execute_empty(DisableEngineRequest(path=path))


async def list(client: VaultClient) -> dict[str, MountResponse]:  # noqa: A001
    return await client.execute(ListMountsRequest())


async def read_config(client: VaultClient, path: str) -> MountConfigResponse:
    return await client.execute(ReadMountConfigRequest(path=path))


__all__ = ["disable", "enable", "list", "read_config"]
