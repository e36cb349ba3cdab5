"""VaultClient – executes endpoints against a Vault server.

Usage::

    settings = VaultClientSettings.builder().address("https://vault:8200").token("s.abc").build()
    async with VaultClient(settings) as client:
        secret = await client.execute(ReadSecretRequest(mount="secret", path="app/db"))
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from vaultkit.adapters.http import HttpxTransport, RawResponse
from vaultkit.api.endpoint import Endpoint
from vaultkit.api.envelope import (
    EMPTY,
    AuthInfo,
    WrapInfo,
    decode_plain,
    decode_response,
    is_empty,
    log_warnings,
    parse_envelope,
    strip_wrap,
)
from vaultkit.api.errors import classify, is_error
from vaultkit.api.sys import ReadHealthRequest, ServerStatus, UnwrapRequest, WrappingLookupRequest
from vaultkit.api.sys.responses import WrappingLookupResponse
from vaultkit.api.token import (
    LookupTokenResponse,
    LookupTokenSelfRequest,
    RenewTokenSelfRequest,
    RevokeTokenSelfRequest,
)
from vaultkit.config.settings import VaultClientSettings, VaultClientSettingsBuilder
from vaultkit.kernel.errors import (
    APIError,
    EmptyResponseError,
    ResponseWrapError,
    WrapInvalidError,
)
from vaultkit.observability.logging import get_logger
from vaultkit.wrapping import WrappedResponse

if TYPE_CHECKING:
    from vaultkit.login.core import LoginMethod, MultiLoginCallback, MultiLoginMethod

logger = get_logger(__name__)

R = TypeVar("R")
C = TypeVar("C", bound="MultiLoginCallback")

DEFAULT_WRAP_TTL = "10m"
_UNSET: Any = object()
_WRAP_INVALID_STATUSES = (400, 404)


class VaultClient:
    """Async client pairing :class:`VaultClientSettings` with an httpx transport.

    The session token is the only mutable state; login flows and
    :meth:`set_token` replace it. One client may serve concurrent requests.

    Args:
        settings: Connection settings; resolved from the ``VAULT_*``
            environment when omitted.
        transport: Replacement httpx transport (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        settings: VaultClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings if settings is not None else VaultClientSettingsBuilder().build()
        self.http = HttpxTransport(self.settings, transport=transport)
        self._token = self.settings.token

    async def __aenter__(self) -> VaultClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"VaultClient(address={self.settings.address!r}, version={self.settings.version})"

    # ------------------------------------------------------------------
    # Token
    # ------------------------------------------------------------------

    @property
    def token(self) -> str:
        return self._token

    def set_token(self, token: str) -> None:
        """Replace the token sent as ``X-Vault-Token`` on subsequent requests."""
        self._token = token

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _headers(self, endpoint: Endpoint[Any], *, wrap_ttl: str | None = None) -> dict[str, str]:
        headers = {"X-Vault-Request": "true"}
        if self._token:
            headers["X-Vault-Token"] = self._token
        if self.settings.namespace:
            headers["X-Vault-Namespace"] = self.settings.namespace
        if wrap_ttl is not None:
            headers["X-Vault-Wrap-TTL"] = wrap_ttl
        if endpoint._endpoint_spec.has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _send(self, endpoint: Endpoint[Any], *, wrap_ttl: str | None = None) -> RawResponse:
        response = await self.http.send(
            endpoint.http_method(),
            endpoint.http_path(),
            headers=self._headers(endpoint, wrap_ttl=wrap_ttl),
            query=endpoint.http_query(),
            content=endpoint.http_body(),
        )
        if is_error(response.status):
            raise classify(response.status, response.content, url=response.url)
        return response

    async def _execute(self, endpoint: Endpoint[Any], response_type: Any) -> Any:
        response = await self._send(endpoint)
        result = decode_response(response.status, response.content, response_type)
        if result is EMPTY:
            if response_type is None:
                return None
            raise EmptyResponseError()
        return result

    async def execute(self, endpoint: Endpoint[R]) -> R:
        """Execute *endpoint* and return its decoded ``data``.

        Returns the :class:`WrapInfo` instead when the server wrapped the
        response. Raises :class:`EmptyResponseError` if a payload was expected
        and the server sent none.
        """
        return await self._execute(endpoint, endpoint.Response)

    async def execute_empty(self, endpoint: Endpoint[Any]) -> None:
        """Execute *endpoint*, discarding any payload."""
        response = await self._send(endpoint)
        if not is_empty(response.status, response.content):
            log_warnings(parse_envelope(response.content))

    async def execute_plain(self, endpoint: Endpoint[R]) -> R:
        """Execute an endpoint whose body is not wrapped in an envelope."""
        response = await self._send(endpoint)
        if is_empty(response.status, response.content):
            if endpoint.Response is None:
                return None  # type: ignore[return-value]
            raise EmptyResponseError()
        return decode_plain(response.content, endpoint.Response)

    async def auth(self, endpoint: Endpoint[Any]) -> AuthInfo:
        """Execute a login or token endpoint and return the envelope's ``auth``."""
        response = await self._send(endpoint)
        if is_empty(response.status, response.content):
            raise EmptyResponseError()
        result = parse_envelope(response.content)
        log_warnings(result)
        if result.auth is None:
            raise EmptyResponseError("The response did not contain an auth block")
        return result.auth

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    async def login(self, mount: str, method: LoginMethod) -> AuthInfo:
        """Log in with *method* at *mount* and adopt the returned token."""
        info = await method.login(self, mount)
        self._adopt(info, mount, type(method).__name__)
        return info

    async def login_multi(self, mount: str, method: MultiLoginMethod[C]) -> C:
        """Start a two-phase login; finish it with :meth:`login_multi_callback`."""
        return await method.login(self, mount)

    async def login_multi_callback(self, mount: str, callback: MultiLoginCallback) -> AuthInfo:
        info = await callback.callback(self, mount)
        self._adopt(info, mount, type(callback).__name__)
        return info

    def _adopt(self, info: AuthInfo, mount: str, method: str) -> None:
        self.set_token(info.client_token)
        logger.info(
            "vault.login",
            mount=mount,
            method=method,
            accessor=info.accessor,
            policies=info.policies,
            lease_duration=info.lease_duration,
        )

    # ------------------------------------------------------------------
    # Token self-service
    # ------------------------------------------------------------------

    async def lookup(self) -> LookupTokenResponse:
        """Look up the properties of the current token."""
        return await self.execute(LookupTokenSelfRequest())

    async def renew(self, increment: str | None = None) -> AuthInfo:
        return await self.auth(RenewTokenSelfRequest(increment=increment))

    async def revoke(self) -> None:
        await self.execute_empty(RevokeTokenSelfRequest())

    async def status(self) -> ServerStatus:
        """Return the server state reported by ``sys/health``."""
        try:
            await self.execute_plain(ReadHealthRequest())
        except APIError as exc:
            return ServerStatus.from_status_code(exc.status)
        return ServerStatus.OK

    # ------------------------------------------------------------------
    # Response wrapping
    # ------------------------------------------------------------------

    async def wrap(self, endpoint: Endpoint[R], ttl: str = DEFAULT_WRAP_TTL) -> WrappedResponse[R]:
        """Execute *endpoint* with its response wrapped for *ttl*.

        Nothing is recorded locally; the returned handle carries the
        :class:`WrapInfo` and the endpoint's response type.
        """
        response = await self._send(endpoint, wrap_ttl=ttl)
        if is_empty(response.status, response.content):
            raise ResponseWrapError()
        info = strip_wrap(parse_envelope(response.content))
        return WrappedResponse(info=info, response=endpoint.Response)

    async def wrap_lookup(self, info: WrappedResponse[Any] | WrapInfo | str) -> WrappingLookupResponse:
        """Return the metadata of a wrapping token without consuming it."""
        token = _wrap_token(info)
        try:
            return await self.execute(WrappingLookupRequest(token=token))
        except APIError as exc:
            _raise_wrap_invalid(exc)
            raise

    async def unwrap(self, info: WrappedResponse[Any] | WrapInfo | str, response: Any = _UNSET) -> Any:
        """Consume a wrapping token and decode the original ``data``.

        *response* is the payload type of the wrapped endpoint; it defaults to
        the one a :class:`WrappedResponse` carries, and the raw JSON value is
        returned when neither is given.
        """
        token = _wrap_token(info)
        if response is _UNSET and isinstance(info, WrappedResponse):
            response = info.response
        response_type = UnwrapRequest.Response if response is _UNSET else response
        try:
            return await self._execute(UnwrapRequest(token=token), response_type)
        except APIError as exc:
            _raise_wrap_invalid(exc)
            raise

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Release the connection pool."""
        await self.http.aclose()


def _wrap_token(info: WrappedResponse[Any] | WrapInfo | str) -> str:
    if isinstance(info, (WrappedResponse, WrapInfo)):
        return info.token
    return info


def _raise_wrap_invalid(exc: APIError) -> None:
    if exc.status in _WRAP_INVALID_STATUSES:
        raise WrapInvalidError(detail={"status": exc.status, "errors": exc.errors}, cause=exc) from exc


__all__ = ["DEFAULT_WRAP_TTL", "VaultClient"]
