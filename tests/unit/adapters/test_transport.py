"""Unit tests – httpx transport (URL building, error mapping, TLS material)."""
from __future__ import annotations

import asyncio
import json
import pathlib

import httpx
import pytest
import respx
from structlog.testing import capture_logs

from vaultkit.adapters.http import HttpxTransport, build_ssl_context
from vaultkit.config.settings import ClientIdentity, VaultClientSettings
from vaultkit.kernel.errors import (
    CertParseError,
    CertReadError,
    TransportError,
    TransportTimeoutError,
)

ADDRESS = "http://vault.test:8200"


def _settings(**overrides: object) -> VaultClientSettings:
    return VaultClientSettings(address=ADDRESS, **overrides)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# URL composition
# ---------------------------------------------------------------------------


class TestUrlFor:
    def test_versioned_path(self) -> None:
        transport = HttpxTransport(_settings())
        assert transport.url_for("secret/data/a") == f"{ADDRESS}/v1/secret/data/a"

    def test_trailing_slash_on_address(self) -> None:
        transport = HttpxTransport(VaultClientSettings(address=f"{ADDRESS}/"))
        assert transport.url_for("/sys/health") == f"{ADDRESS}/v1/sys/health"

    def test_query_is_encoded(self) -> None:
        transport = HttpxTransport(_settings())
        url = transport.url_for("x", [("version", "2"), ("name", "a b")])
        assert url == f"{ADDRESS}/v1/x?version=2&name=a+b"

    def test_api_version(self) -> None:
        transport = HttpxTransport(_settings(version=2))
        assert transport.url_for("x") == f"{ADDRESS}/v2/x"


# ---------------------------------------------------------------------------
# Sending
# ---------------------------------------------------------------------------


class TestSend:
    @respx.mock
    def test_returns_raw_response(self) -> None:
        respx.get(f"{ADDRESS}/v1/sys/health").mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> None:
            async with HttpxTransport(_settings()) as transport:
                response = await transport.send("GET", "sys/health")
            assert response.status == 200
            assert json.loads(response.content) == {"ok": True}
            assert response.url == f"{ADDRESS}/v1/sys/health"

        asyncio.run(run())

    @respx.mock
    def test_list_verb_and_headers(self) -> None:
        route = respx.route(method="LIST", url=f"{ADDRESS}/v1/secret/metadata/").mock(
            return_value=httpx.Response(200, json={"data": {"keys": ["a"]}})
        )

        async def run() -> None:
            async with HttpxTransport(_settings()) as transport:
                await transport.send("LIST", "secret/metadata/", headers={"X-Vault-Token": "t"})
            sent = route.calls.last.request
            assert sent.method == "LIST"
            assert sent.headers["x-vault-token"] == "t"

        asyncio.run(run())

    @respx.mock
    def test_error_statuses_are_returned_not_raised(self) -> None:
        respx.get(f"{ADDRESS}/v1/missing").mock(return_value=httpx.Response(404, json={"errors": []}))

        async def run() -> int:
            async with HttpxTransport(_settings()) as transport:
                return (await transport.send("GET", "missing")).status

        assert asyncio.run(run()) == 404

    @respx.mock
    def test_timeout_is_mapped(self) -> None:
        respx.get(f"{ADDRESS}/v1/slow").mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> None:
            async with HttpxTransport(_settings()) as transport:
                await transport.send("GET", "slow")

        with pytest.raises(TransportTimeoutError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.method == "GET"
        assert exc_info.value.url == f"{ADDRESS}/v1/slow"

    @respx.mock
    def test_connect_error_is_mapped(self) -> None:
        respx.get(f"{ADDRESS}/v1/down").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with HttpxTransport(_settings()) as transport:
                await transport.send("GET", "down")

        with pytest.raises(TransportError) as exc_info:
            asyncio.run(run())
        assert not isinstance(exc_info.value, TransportTimeoutError)
        assert isinstance(exc_info.value.cause, httpx.ConnectError)


# ---------------------------------------------------------------------------
# TLS material
# ---------------------------------------------------------------------------


class TestBuildSSLContext:
    def test_default_trust_store(self) -> None:
        assert build_ssl_context(_settings()) is True

    def test_verification_disabled(self) -> None:
        with capture_logs() as logs:
            assert build_ssl_context(_settings(verify=False)) is False
        assert logs[0]["event"] == "vault.tls_verify_disabled"

    def test_missing_ca_file(self, tmp_path: pathlib.Path) -> None:
        missing = str(tmp_path / "nope.pem")
        with pytest.raises(CertReadError) as exc_info:
            build_ssl_context(_settings(ca_certs=(missing,)))
        assert exc_info.value.path == missing

    def test_ca_file_without_certificate(self, tmp_path: pathlib.Path) -> None:
        bogus = tmp_path / "bogus.pem"
        bogus.write_text("not a certificate")
        with pytest.raises(CertParseError):
            build_ssl_context(_settings(ca_certs=(str(bogus),)))

    def test_binary_ca_file(self, tmp_path: pathlib.Path) -> None:
        binary = tmp_path / "ca.der"
        binary.write_bytes(b"\x30\x82\xff\xfe")
        with pytest.raises(CertParseError):
            build_ssl_context(_settings(ca_certs=(str(binary),)))

    def test_missing_identity_files(self, tmp_path: pathlib.Path) -> None:
        identity = ClientIdentity(str(tmp_path / "c.pem"), str(tmp_path / "k.pem"))
        with pytest.raises(CertReadError):
            build_ssl_context(_settings(identity=identity))

    def test_construction_fails_fast(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(CertReadError):
            HttpxTransport(_settings(ca_certs=(str(tmp_path / "missing.pem"),)))
