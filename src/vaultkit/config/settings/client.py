"""Config settings – VaultClientSettings and its builder.

Values not set explicitly on the builder fall back to the environment:

* ``address``: ``VAULT_ADDR``, then ``http://127.0.0.1:8200``
* ``token``: ``VAULT_TOKEN``, then empty
* ``verify``: false when ``VAULT_SKIP_VERIFY`` is set to anything but
  ``0``/``f``/``false``
* ``ca_certs``: ``VAULT_CACERT`` plus every file in ``VAULT_CAPATH``
* ``identity``: ``VAULT_CLIENT_CERT`` + ``VAULT_CLIENT_KEY``
* ``namespace``: ``VAULT_NAMESPACE``

The address is validated when the settings are built.
"""
from __future__ import annotations

import dataclasses
import pathlib
from urllib.parse import urlsplit

from vaultkit.config.settings.loaders import EnvSettingsLoader, VaultEnvironment
from vaultkit.kernel.errors import ClientBuildError
from vaultkit.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ADDRESS = "http://127.0.0.1:8200"
DEFAULT_TIMEOUT = 30.0
VALID_SCHEMES = ("http", "https")

_FALSY = ("0", "f", "false")


@dataclasses.dataclass(frozen=True)
class ClientIdentity:
    """Client certificate and key presented for mutual TLS."""

    cert_path: str
    key_path: str


@dataclasses.dataclass(frozen=True)
class VaultClientSettings:
    """Immutable connection settings for a :class:`~vaultkit.client.VaultClient`."""

    address: str = DEFAULT_ADDRESS
    token: str = ""
    ca_certs: tuple[str, ...] = ()
    identity: ClientIdentity | None = None
    verify: bool = True
    version: int = 1
    timeout: float | None = DEFAULT_TIMEOUT
    namespace: str | None = None

    def __post_init__(self) -> None:
        validate_address(self.address)
        if self.version < 1:
            raise ClientBuildError(f"Invalid API version: {self.version}")

    @classmethod
    def builder(cls) -> VaultClientSettingsBuilder:
        return VaultClientSettingsBuilder()


def validate_address(address: str) -> None:
    """Reject anything that is not an absolute http(s) URL."""
    try:
        parts = urlsplit(address)
    except ValueError as exc:
        raise ClientBuildError(f"Invalid URL format: {address}", cause=exc) from exc
    if parts.scheme not in VALID_SCHEMES:
        raise ClientBuildError(
            f"Invalid scheme for HTTP URL: {parts.scheme or address!r}",
            detail={"address": address},
        )
    if not parts.netloc:
        raise ClientBuildError(f"Invalid URL format: {address}", detail={"address": address})


class VaultClientSettingsBuilder:
    """Fluent builder for :class:`VaultClientSettings`.

    Usage::

        settings = (
            VaultClientSettingsBuilder()
            .address("https://vault.internal:8200")
            .token("s.abc")
            .build()
        )
    """

    def __init__(self, environment: VaultEnvironment | None = None) -> None:
        self._env = environment
        self._address: str | None = None
        self._token: str | None = None
        self._ca_certs: list[str] | None = None
        self._identity: ClientIdentity | None = None
        self._identity_set = False
        self._verify: bool | None = None
        self._version = 1
        self._timeout: float | None = DEFAULT_TIMEOUT
        self._namespace: str | None = None

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def address(self, address: str) -> VaultClientSettingsBuilder:
        self._address = str(address)
        return self

    def token(self, token: str) -> VaultClientSettingsBuilder:
        self._token = str(token)
        return self

    def ca_certs(self, paths: list[str]) -> VaultClientSettingsBuilder:
        self._ca_certs = [str(p) for p in paths]
        return self

    def identity(self, cert_path: str, key_path: str) -> VaultClientSettingsBuilder:
        self._identity = ClientIdentity(str(cert_path), str(key_path))
        self._identity_set = True
        return self

    def verify(self, verify: bool) -> VaultClientSettingsBuilder:
        self._verify = bool(verify)
        return self

    def version(self, version: int) -> VaultClientSettingsBuilder:
        self._version = int(version)
        return self

    def timeout(self, seconds: float | None) -> VaultClientSettingsBuilder:
        self._timeout = seconds
        return self

    def namespace(self, namespace: str) -> VaultClientSettingsBuilder:
        self._namespace = namespace
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> VaultClientSettings:
        env = self._env if self._env is not None else EnvSettingsLoader().load(VaultEnvironment)
        verify = self._verify if self._verify is not None else self._default_verify(env)
        return VaultClientSettings(
            address=self._address if self._address is not None else self._default_address(env),
            token=self._token if self._token is not None else self._default_token(env),
            ca_certs=tuple(self._ca_certs if self._ca_certs is not None else self._default_ca_certs(env)),
            identity=self._identity if self._identity_set else self._default_identity(env),
            verify=verify,
            version=self._version,
            timeout=self._timeout,
            namespace=self._namespace if self._namespace is not None else env.namespace,
        )

    # ------------------------------------------------------------------
    # Environment defaults
    # ------------------------------------------------------------------

    def _default_address(self, env: VaultEnvironment) -> str:
        if env.addr:
            logger.info("vault.settings_address", source="VAULT_ADDR", address=env.addr)
            return env.addr
        logger.info("vault.settings_address", source="default", address=DEFAULT_ADDRESS)
        return DEFAULT_ADDRESS

    def _default_token(self, env: VaultEnvironment) -> str:
        if env.token is not None:
            logger.info("vault.settings_token", source="VAULT_TOKEN")
            return env.token
        logger.info("vault.settings_token", source="default")
        return ""

    def _default_verify(self, env: VaultEnvironment) -> bool:
        if env.skip_verify is None:
            return True
        return env.skip_verify.lower() in _FALSY

    def _default_ca_certs(self, env: VaultEnvironment) -> list[str]:
        paths: list[str] = []
        if env.cacert:
            logger.info("vault.settings_cacert", path=env.cacert)
            paths.append(env.cacert)
        if env.capath:
            directory = pathlib.Path(env.capath)
            if directory.is_dir():
                logger.info("vault.settings_capath", path=env.capath)
                paths.extend(str(p) for p in sorted(directory.iterdir()) if p.is_file())
        return paths

    def _default_identity(self, env: VaultEnvironment) -> ClientIdentity | None:
        if not env.client_cert or not env.client_key:
            logger.debug("vault.settings_identity", configured=False)
            return None
        return ClientIdentity(env.client_cert, env.client_key)


__all__ = [
    "ClientIdentity",
    "DEFAULT_ADDRESS",
    "VaultClientSettings",
    "VaultClientSettingsBuilder",
    "validate_address",
]
