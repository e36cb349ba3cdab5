"""Unit tests – response wrapping round trips against FakeVault."""
from __future__ import annotations

import asyncio

import pytest
from pydantic import BaseModel

from vaultkit.api.kv2 import ReadSecretRequest, ReadSecretResponse
from vaultkit.api.sys import ListMountsRequest, MountResponse
from vaultkit.api.sys.responses import WrappingLookupResponse
from vaultkit.kernel.errors import WrapInvalidError
from vaultkit.testing import FakeVault
from vaultkit.wrapping import WrappedResponse


class TestWrapMountList:
    """Wrap ``sys/mounts``, look the token up, unwrap it, then fail on reuse."""

    def test_wrap_lookup_unwrap_single_use(self) -> None:
        vault = FakeVault()

        async def run() -> None:
            async with vault.client() as client:
                wrapped = await client.wrap(ListMountsRequest(), "60s")
                assert isinstance(wrapped, WrappedResponse)
                assert wrapped.token
                assert wrapped.info.ttl == 60

                lookup = await client.wrap_lookup(wrapped.info)
                assert isinstance(lookup, WrappingLookupResponse)
                assert lookup.creation_path == "sys/mounts"
                assert lookup.creation_ttl == 60

                mounts = await wrapped.unwrap(client)
                assert isinstance(mounts["secret/"], MountResponse)
                assert mounts["secret/"].mount_type == "kv"

                with pytest.raises(WrapInvalidError):
                    await client.wrap_lookup(wrapped.info)
                with pytest.raises(WrapInvalidError):
                    await wrapped.unwrap(client)

        asyncio.run(run())

    def test_default_ttl_is_ten_minutes(self) -> None:
        vault = FakeVault()

        async def run() -> WrappedResponse[dict[str, MountResponse]]:
            async with vault.client() as client:
                return await client.wrap(ListMountsRequest())

        assert asyncio.run(run()).info.ttl == 600
        assert vault.requests[-1].headers["x-vault-wrap-ttl"] == "10m"

    def test_repr_hides_token(self) -> None:
        vault = FakeVault()

        async def run() -> WrappedResponse[dict[str, MountResponse]]:
            async with vault.client() as client:
                return await client.wrap(ListMountsRequest())

        wrapped = asyncio.run(run())
        assert wrapped.token not in repr(wrapped)


class TestUnwrapTyping:
    def test_unwrap_by_token_string_returns_raw_json(self) -> None:
        vault = FakeVault().seed_secret("secret", "app", {"password": "p"})

        async def run() -> object:
            async with vault.client() as client:
                wrapped = await client.wrap(ReadSecretRequest(mount="secret", path="app"))
                return await client.unwrap(wrapped.token)

        data = asyncio.run(run())
        assert isinstance(data, dict)
        assert data["data"] == {"password": "p"}

    def test_unwrap_with_explicit_type(self) -> None:
        class _Mine(BaseModel):
            data: dict[str, str]

        vault = FakeVault().seed_secret("secret", "app", {"password": "p"})

        async def run() -> _Mine:
            async with vault.client() as client:
                wrapped = await client.wrap(ReadSecretRequest(mount="secret", path="app"))
                return await client.unwrap(wrapped.info, response=_Mine)

        assert asyncio.run(run()).data == {"password": "p"}

    def test_handle_unwraps_into_endpoint_response(self) -> None:
        vault = FakeVault().seed_secret("secret", "app", {"password": "p"})

        async def run() -> ReadSecretResponse:
            async with vault.client() as client:
                wrapped = await client.wrap(ReadSecretRequest(mount="secret", path="app"))
                return await wrapped.unwrap(client)

        result = asyncio.run(run())
        assert isinstance(result, ReadSecretResponse)
        assert result.metadata.version == 1

    def test_unwrap_does_not_need_a_session_token(self) -> None:
        vault = FakeVault()

        async def run() -> object:
            async with vault.client() as admin:
                wrapped = await admin.wrap(ListMountsRequest())
            async with vault.client(token="") as anonymous:
                return await anonymous.unwrap(wrapped.info)

        assert "secret/" in asyncio.run(run())

    def test_client_unwraps_the_handle_it_returned(self) -> None:
        vault = FakeVault()

        async def run() -> dict[str, MountResponse]:
            async with vault.client() as client:
                wrapped = await client.wrap(ListMountsRequest(), "60s")
                lookup = await client.wrap_lookup(wrapped)
                assert lookup.creation_path == "sys/mounts"
                return await client.unwrap(wrapped)

        mounts = asyncio.run(run())
        assert isinstance(mounts["secret/"], MountResponse)

    def test_explicit_type_overrides_the_handle(self) -> None:
        vault = FakeVault().seed_secret("secret", "app", {"password": "p"})

        async def run() -> object:
            async with vault.client() as client:
                wrapped = await client.wrap(ReadSecretRequest(mount="secret", path="app"))
                return await client.unwrap(wrapped, response=dict)

        assert asyncio.run(run())["data"] == {"password": "p"}  # type: ignore[index]
