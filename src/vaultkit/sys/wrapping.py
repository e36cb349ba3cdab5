"""Sys helpers – response wrapping tokens."""
from __future__ import annotations

from typing import Any

from vaultkit.api.envelope import WrapInfo
from vaultkit.api.sys import WrappingLookupResponse
from vaultkit.client import VaultClient


async def lookup(client: VaultClient, token: WrapInfo | str) -> WrappingLookupResponse:
    return await client.wrap_lookup(token)


async def unwrap(client: VaultClient, token: WrapInfo | str, as_type: Any = None) -> Any:
    """Consume *token*; the wrapped ``data`` is validated as *as_type* when given."""
    if as_type is None:
        return await client.unwrap(token)
    return await client.unwrap(token, response=as_type)


__all__ = ["lookup", "unwrap"]
