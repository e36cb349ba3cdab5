"""Sys helpers – ACL policies."""
from __future__ import annotations

from vaultkit.api.sys import (
    DeletePolicyRequest,
    ListPoliciesRequest,
    ReadPolicyRequest,
    ReadPolicyResponse,
    SetPolicyRequest,
)
from vaultkit.client import VaultClient


async def set(client: VaultClient, name: str, policy: str) -> None:  # noqa: A001
    await client.execute_empty(SetPolicyRequest(name=name, policy=policy))


async def read(client: VaultClient, name: str) -> ReadPolicyResponse:
    return await client.execute(ReadPolicyRequest(name=name))


async def delete(client: VaultClient, name: str) -> None:
    await client.execute_empty(DeletePolicyRequest(name=name))


async def list(client: VaultClient) -> list[str]:  # noqa: A001
    response = await client.execute(ListPoliciesRequest())
    return response.keys


__all__ = ["delete", "list", "read", "set"]
