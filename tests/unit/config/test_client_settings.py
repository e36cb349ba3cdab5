"""Unit tests – VaultClientSettings and its environment fallbacks."""
from __future__ import annotations

import pathlib

import pytest

from vaultkit.config.settings import (
    ClientIdentity,
    EnvSettingsLoader,
    VaultClientSettings,
    VaultClientSettingsBuilder,
    VaultEnvironment,
)
from vaultkit.kernel.errors import ClientBuildError

_VAULT_VARS = (
    "VAULT_ADDR",
    "VAULT_TOKEN",
    "VAULT_SKIP_VERIFY",
    "VAULT_CACERT",
    "VAULT_CAPATH",
    "VAULT_CLIENT_CERT",
    "VAULT_CLIENT_KEY",
    "VAULT_NAMESPACE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VAULT_VARS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Defaults and validation
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_built_from_empty_environment(self) -> None:
        settings = VaultClientSettingsBuilder().build()
        assert settings.address == "http://127.0.0.1:8200"
        assert settings.token == ""
        assert settings.verify is True
        assert settings.ca_certs == ()
        assert settings.identity is None
        assert settings.version == 1
        assert settings.namespace is None

    def test_explicit_values_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VAULT_ADDR", "https://env:8200")
        monkeypatch.setenv("VAULT_TOKEN", "env-token")
        settings = (
            VaultClientSettings.builder()
            .address("https://explicit:8200")
            .token("explicit-token")
            .namespace("team-a")
            .timeout(5)
            .build()
        )
        assert settings.address == "https://explicit:8200"
        assert settings.token == "explicit-token"
        assert settings.namespace == "team-a"
        assert settings.timeout == 5

    def test_settings_are_frozen(self) -> None:
        settings = VaultClientSettings()
        with pytest.raises(AttributeError):
            settings.token = "x"  # type: ignore[misc]


class TestAddressValidation:
    @pytest.mark.parametrize("address", ["ftp://vault:21", "vault:8200", "http://", "not a url"])
    def test_rejected(self, address: str) -> None:
        with pytest.raises(ClientBuildError):
            VaultClientSettings(address=address)

    def test_builder_validates(self) -> None:
        with pytest.raises(ClientBuildError, match="Invalid scheme"):
            VaultClientSettingsBuilder().address("gopher://vault").build()

    def test_version_must_be_positive(self) -> None:
        with pytest.raises(ClientBuildError):
            VaultClientSettings(version=0)


# ---------------------------------------------------------------------------
# Environment fallbacks
# ---------------------------------------------------------------------------


class TestEnvironment:
    def test_addr_and_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VAULT_ADDR", "https://vault.internal:8200")
        monkeypatch.setenv("VAULT_TOKEN", "hvs.env")
        settings = VaultClientSettingsBuilder().build()
        assert settings.address == "https://vault.internal:8200"
        assert settings.token == "hvs.env"

    @pytest.mark.parametrize(
        ("value", "verify"),
        [("1", False), ("true", False), ("yes", False), ("0", True), ("f", True), ("FALSE", True)],
    )
    def test_skip_verify(self, monkeypatch: pytest.MonkeyPatch, value: str, verify: bool) -> None:
        monkeypatch.setenv("VAULT_SKIP_VERIFY", value)
        assert VaultClientSettingsBuilder().build().verify is verify

    def test_cacert_and_capath(self, monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path) -> None:
        capath = tmp_path / "cas"
        capath.mkdir()
        (capath / "b.pem").write_text("b")
        (capath / "a.pem").write_text("a")
        monkeypatch.setenv("VAULT_CACERT", "/etc/vault/ca.pem")
        monkeypatch.setenv("VAULT_CAPATH", str(capath))
        settings = VaultClientSettingsBuilder().build()
        assert settings.ca_certs == ("/etc/vault/ca.pem", str(capath / "a.pem"), str(capath / "b.pem"))

    def test_identity_needs_cert_and_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VAULT_CLIENT_CERT", "/c.pem")
        assert VaultClientSettingsBuilder().build().identity is None
        monkeypatch.setenv("VAULT_CLIENT_KEY", "/k.pem")
        assert VaultClientSettingsBuilder().build().identity == ClientIdentity("/c.pem", "/k.pem")

    def test_namespace(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VAULT_NAMESPACE", "ns1")
        assert VaultClientSettingsBuilder().build().namespace == "ns1"

    def test_injected_environment(self) -> None:
        env = EnvSettingsLoader({"VAULT_ADDR": "http://injected:8200"}).load(VaultEnvironment)
        assert VaultClientSettingsBuilder(env).build().address == "http://injected:8200"
