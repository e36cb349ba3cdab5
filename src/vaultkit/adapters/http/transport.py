"""HTTP adapter – HttpxTransport."""
from __future__ import annotations

import asyncio
import dataclasses
import ssl
from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

import certifi
import httpx

from vaultkit.config.settings import ClientIdentity, VaultClientSettings
from vaultkit.kernel.errors import (
    CertParseError,
    CertReadError,
    RequestCancelledError,
    TransportError,
    TransportTimeoutError,
)
from vaultkit.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class RawResponse:
    """Status, body and headers of a completed exchange."""

    status: int
    content: bytes
    headers: Mapping[str, str]
    url: str


def _read_pem(path: str) -> str:
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        raise CertReadError(path, cause=exc) from exc
    try:
        return data.decode("ascii")
    except UnicodeDecodeError as exc:
        raise CertParseError(path, cause=exc) from exc


def _load_ca(context: ssl.SSLContext, path: str) -> None:
    pem = _read_pem(path)
    try:
        context.load_verify_locations(cadata=pem)
    except (ssl.SSLError, ValueError) as exc:
        raise CertParseError(path, cause=exc) from exc


def _load_identity(context: ssl.SSLContext, identity: ClientIdentity) -> None:
    for path in (identity.cert_path, identity.key_path):
        _read_pem(path)
    try:
        context.load_cert_chain(identity.cert_path, identity.key_path)
    except ssl.SSLError as exc:
        raise CertParseError(identity.cert_path, cause=exc) from exc


def build_ssl_context(settings: VaultClientSettings) -> ssl.SSLContext | bool:
    """Return the ``verify`` argument for httpx.

    ``False`` when verification is disabled and no identity is configured,
    ``True`` for the default trust store, otherwise a prepared context.
    """
    if not settings.verify:
        logger.warning("vault.tls_verify_disabled", address=settings.address)
        if settings.identity is None:
            return False
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    else:
        if not settings.ca_certs and settings.identity is None:
            return True
        context = ssl.create_default_context(cafile=certifi.where())
        for path in settings.ca_certs:
            _load_ca(context, path)
    if settings.identity is not None:
        _load_identity(context, settings.identity)
    return context


class HttpxTransport:
    """One shared :class:`httpx.AsyncClient` bound to a Vault address.

    TLS material is loaded once, at construction. *transport* replaces the
    network layer (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        settings: VaultClientSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            verify=build_ssl_context(settings),
            timeout=settings.timeout,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def settings(self) -> VaultClientSettings:
        return self._settings

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def url_for(self, path: str, query: Sequence[tuple[str, str]] | None = None) -> str:
        """Compose ``{address}/v{version}/{path}[?{query}]``."""
        base = f"{self._settings.address.rstrip('/')}/v{self._settings.version}/{path.lstrip('/')}"
        if query:
            return f"{base}?{urlencode(list(query))}"
        return base

    async def send(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Sequence[tuple[str, str]] | None = None,
        content: bytes | None = None,
    ) -> RawResponse:
        url = self.url_for(path, query)
        method = str(method)
        logger.debug("vault.request", method=method, url=url)
        try:
            response = await self._client.request(method, url, headers=headers, content=content)
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            raise RequestCancelledError(
                f"Request cancelled: {method} {url}", method=method, url=url, cause=exc
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(
                f"HTTP request timed out: {method} {url}", method=method, url=url, cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Error sending HTTP request: {method} {url}: {exc}", method=method, url=url, cause=exc
            ) from exc
        logger.debug("vault.response", method=method, url=url, status=response.status_code)
        return RawResponse(
            status=response.status_code,
            content=response.content,
            headers=response.headers,
            url=url,
        )

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["HttpxTransport", "RawResponse", "build_ssl_context"]
