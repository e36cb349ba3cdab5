"""Login – strategy protocols.

A :class:`LoginMethod` turns credentials into an :class:`AuthInfo` in one
request. A :class:`MultiLoginMethod` needs an out-of-band step (a browser
redirect) and hands back a :class:`MultiLoginCallback` that finishes the
exchange.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from vaultkit.api.envelope import AuthInfo

if TYPE_CHECKING:
    from vaultkit.client import VaultClient

C_co = TypeVar("C_co", bound="MultiLoginCallback", covariant=True)


@runtime_checkable
class LoginMethod(Protocol):
    async def login(self, client: VaultClient, mount: str) -> AuthInfo: ...


@runtime_checkable
class MultiLoginCallback(Protocol):
    async def callback(self, client: VaultClient, mount: str) -> AuthInfo: ...


@runtime_checkable
class MultiLoginMethod(Protocol[C_co]):
    async def login(self, client: VaultClient, mount: str) -> C_co: ...


__all__ = ["LoginMethod", "MultiLoginCallback", "MultiLoginMethod"]
