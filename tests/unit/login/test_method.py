"""Unit tests – auth method enum and discovery."""
from __future__ import annotations

import asyncio

import pytest

from vaultkit import sys
from vaultkit.kernel.errors import InvalidLoginMethodError
from vaultkit.login import Method, default_mount, list_methods, list_supported
from vaultkit.login.method import SUPPORTED_METHODS
from vaultkit.testing import FakeVault


class TestMethod:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("approle", Method.APPROLE),
            ("USERPASS", Method.USERPASS),
            ("Kubernetes", Method.KUBERNETES),
            ("oidc", Method.OIDC),
            ("token", Method.TOKEN),
        ],
    )
    def test_parse_is_case_insensitive(self, raw: str, expected: Method) -> None:
        assert Method.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidLoginMethodError, match="plugin-x") as exc_info:
            Method.parse("plugin-x")
        assert exc_info.value.method == "plugin-x"

    def test_display_names(self) -> None:
        assert Method.USERPASS.display_name == "Username/Password"
        assert Method.CERT.display_name == "TLS Certificates"
        assert all(m.display_name for m in Method)

    def test_default_mount(self) -> None:
        assert Method.APPROLE.default_mount == "approle"
        assert default_mount("OIDC") == "oidc"
        assert default_mount(Method.KUBERNETES) == "kubernetes"

    def test_str(self) -> None:
        assert str(Method.JWT) == "jwt"

    def test_supported_subset(self) -> None:
        assert Method.TOKEN not in SUPPORTED_METHODS
        assert {Method.APPROLE, Method.OIDC, Method.USERPASS} <= SUPPORTED_METHODS


class TestDiscovery:
    def test_list_methods(self) -> None:
        vault = FakeVault()
        vault.seed_user("userpass", "alice", "pw")
        vault.seed_approle("ci", "builder")

        async def run() -> None:
            async with vault.client() as client:
                methods = await list_methods(client)
                assert methods == {"token": Method.TOKEN, "userpass": Method.USERPASS, "ci": Method.APPROLE}

        asyncio.run(run())

    def test_list_supported_skips_token(self) -> None:
        vault = FakeVault()
        vault.seed_oidc_role("oidc", "default")

        async def run() -> None:
            async with vault.client() as client:
                assert await list_supported(client) == {"oidc": Method.OIDC}

        asyncio.run(run())

    def test_unknown_mount_type(self) -> None:
        vault = FakeVault()

        async def run() -> None:
            async with vault.client() as client:
                await sys.auth.enable(client, "custom", "vault-plugin-custom")
                with pytest.raises(InvalidLoginMethodError):
                    await list_methods(client)
                assert "custom" not in await list_supported(client)

        asyncio.run(run())
