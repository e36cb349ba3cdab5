"""Token helpers.

Functions that mint or renew a token return the envelope's
:class:`~vaultkit.api.envelope.AuthInfo`; none of them change the client's
own token.
"""
from __future__ import annotations

from typing import Any

from vaultkit.api.envelope import AuthInfo
from vaultkit.api.token import (
    CreateOrphanTokenRequest,
    CreateRoleTokenRequest,
    CreateTokenRequest,
    ListAccessorsRequest,
    LookupTokenAccessorRequest,
    LookupTokenRequest,
    LookupTokenResponse,
    LookupTokenSelfRequest,
    RenewTokenRequest,
    RenewTokenSelfRequest,
    RevokeTokenAccessorRequest,
    RevokeTokenRequest,
    RevokeTokenSelfRequest,
)
from vaultkit.client import VaultClient


async def new(client: VaultClient, **options: Any) -> AuthInfo:
    """Create a child of the current token; *options* are ``CreateTokenRequest`` fields."""
    return await client.auth(CreateTokenRequest(**options))


async def new_orphan(client: VaultClient, **options: Any) -> AuthInfo:
    return await client.auth(CreateOrphanTokenRequest(**options))


async def new_role(client: VaultClient, role: str, **options: Any) -> AuthInfo:
    return await client.auth(CreateRoleTokenRequest(role_name=role, **options))


async def lookup(client: VaultClient, token: str) -> LookupTokenResponse:
    return await client.execute(LookupTokenRequest(token=token))


async def lookup_self(client: VaultClient) -> LookupTokenResponse:
    return await client.execute(LookupTokenSelfRequest())


async def lookup_accessor(client: VaultClient, accessor: str) -> LookupTokenResponse:
    return await client.execute(LookupTokenAccessorRequest(accessor=accessor))


async def renew(client: VaultClient, token: str, increment: str | None = None) -> AuthInfo:
    return await client.auth(RenewTokenRequest(token=token, increment=increment))


async def renew_self(client: VaultClient, increment: str | None = None) -> AuthInfo:
    return await client.auth(RenewTokenSelfRequest(increment=increment))


async def revoke(client: VaultClient, token: str) -> None:
    await client.execute_empty(RevokeTokenRequest(token=token))


async def revoke_self(client: VaultClient) -> None:
    await client.execute_empty(RevokeTokenSelfRequest())


async def revoke_accessor(client: VaultClient, accessor: str) -> None:
    await client.execute_empty(RevokeTokenAccessorRequest(accessor=accessor))


async def list_accessors(client: VaultClient) -> list[str]:
    response = await client.execute(ListAccessorsRequest())
    return response.keys


__all__ = [
    "list_accessors",
    "lookup",
    "lookup_accessor",
    "lookup_self",
    "new",
    "new_orphan",
    "new_role",
    "renew",
    "renew_self",
    "revoke",
    "revoke_accessor",
    "revoke_self",
]
