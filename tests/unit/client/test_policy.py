"""Unit tests – sys.policy helpers over the wire (respx)."""
from __future__ import annotations

import asyncio
import json

import httpx
import respx

from vaultkit import sys
from vaultkit.client import VaultClient
from vaultkit.config.settings import VaultClientSettings

ADDRESS = "http://vault.test:8200"
POLICY = 'path "secret/data/app/*" {\n  capabilities = ["read"]\n}\n'


def _client() -> VaultClient:
    return VaultClient(VaultClientSettings(address=ADDRESS, token="hvs.root"))


def _envelope(data: object) -> dict[str, object]:
    return {
        "request_id": "r",
        "lease_id": "",
        "renewable": False,
        "lease_duration": 0,
        "data": data,
        "wrap_info": None,
        "warnings": None,
        "auth": None,
    }


class TestPolicyHelpers:
    @respx.mock
    def test_set(self) -> None:
        route = respx.post(f"{ADDRESS}/v1/sys/policies/acl/app-read").mock(return_value=httpx.Response(204))

        async def run() -> None:
            async with _client() as client:
                await sys.policy.set(client, "app-read", POLICY)

        asyncio.run(run())
        assert json.loads(route.calls.last.request.content) == {"policy": POLICY}

    @respx.mock
    def test_read(self) -> None:
        respx.get(f"{ADDRESS}/v1/sys/policies/acl/app-read").mock(
            return_value=httpx.Response(200, json=_envelope({"name": "app-read", "policy": POLICY}))
        )

        async def run() -> None:
            async with _client() as client:
                policy = await sys.policy.read(client, "app-read")
                assert policy.name == "app-read"
                assert policy.policy == POLICY

        asyncio.run(run())

    @respx.mock
    def test_list(self) -> None:
        route = respx.route(method="LIST", url=f"{ADDRESS}/v1/sys/policies/acl").mock(
            return_value=httpx.Response(200, json=_envelope({"keys": ["app-read", "default", "root"]}))
        )

        async def run() -> list[str]:
            async with _client() as client:
                return await sys.policy.list(client)

        assert asyncio.run(run()) == ["app-read", "default", "root"]
        assert route.called

    @respx.mock
    def test_delete(self) -> None:
        route = respx.delete(f"{ADDRESS}/v1/sys/policies/acl/app-read").mock(return_value=httpx.Response(204))

        async def run() -> None:
            async with _client() as client:
                await sys.policy.delete(client, "app-read")

        asyncio.run(run())
        assert route.called
