"""Response wrapping – a handle on a wrapped endpoint result."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from vaultkit.api.envelope import WrapInfo

if TYPE_CHECKING:
    from vaultkit.api.sys.responses import WrappingLookupResponse
    from vaultkit.client import VaultClient

R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class WrappedResponse(Generic[R]):
    """The :class:`WrapInfo` of a wrapped call plus the type to unwrap into.

    The wrapping token is single-use: a second :meth:`unwrap` raises
    :class:`~vaultkit.kernel.errors.WrapInvalidError`.
    """

    info: WrapInfo
    response: Any = None

    @property
    def token(self) -> str:
        return self.info.token

    async def lookup(self, client: VaultClient) -> WrappingLookupResponse:
        return await client.wrap_lookup(self.info)

    async def unwrap(self, client: VaultClient) -> R:
        return await client.unwrap(self.info, response=self.response)

    def __repr__(self) -> str:
        return (
            f"WrappedResponse(accessor={self.info.accessor!r}, ttl={self.info.ttl}, "
            f"creation_path={self.info.creation_path!r})"
        )


__all__ = ["WrappedResponse"]
