"""Login – interactive OIDC through the user's browser.

The flow takes two steps::

    callback = await client.login_multi("oidc", OIDCLogin(role="dev"))
    webbrowser.open(callback.url)
    await client.login_multi_callback("oidc", callback)

The first step binds a loopback listener and asks Vault for the provider's
authorization URL, using the listener as ``redirect_uri``. The second waits
for the provider to redirect the browser back with ``state`` and ``code``,
shuts the listener down and exchanges the triple for a token. There is no
default timeout; wrap the second step in ``asyncio.timeout`` if needed.
"""
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from urllib.parse import parse_qs, urlsplit

from aiohttp import web

from vaultkit.api.auth.oidc import OIDCAuthRequest, OIDCCallbackRequest
from vaultkit.api.envelope import AuthInfo
from vaultkit.kernel.errors import SerializationError, TransportError, VaultError
from vaultkit.observability.logging import get_logger

if TYPE_CHECKING:
    from vaultkit.client import VaultClient

logger = get_logger(__name__)

DEFAULT_PORT = 8250
CALLBACK_PATH = "/oidc/callback"
_LISTEN_HOST = "127.0.0.1"
_DONE_PAGE = "Vault login complete. You may close this window."


class OIDCCallbackError(VaultError):
    """The identity provider redirected back with an error instead of a code."""

    default_code = "oidc_callback_error"


def nonce_from(auth_url: str) -> str:
    """Return the ``nonce`` query parameter of an authorization URL."""
    values = parse_qs(urlsplit(auth_url).query).get("nonce")
    if not values:
        raise SerializationError(
            "Authorization URL does not carry a nonce",
            content=auth_url,
            payload_type="OIDCAuthResponse",
        )
    return values[0]


class CallbackListener:
    """Loopback HTTP listener resolving the provider redirect once."""

    def __init__(self, host: str = _LISTEN_HOST, port: int = DEFAULT_PORT) -> None:
        self._host = host
        self._requested_port = port
        self._runner: web.AppRunner | None = None
        self._result: asyncio.Future[tuple[str, str]] | None = None
        self.port = port

    @property
    def redirect_uri(self) -> str:
        return f"http://localhost:{self.port}{CALLBACK_PATH}"

    @property
    def is_running(self) -> bool:
        return self._runner is not None

    async def start(self) -> None:
        self._result = asyncio.get_running_loop().create_future()
        app = web.Application()
        app.router.add_get(CALLBACK_PATH, self._handle_callback)
        runner = web.AppRunner(app, access_log=None)
        await runner.setup()
        try:
            await web.TCPSite(runner, self._host, self._requested_port).start()
        except OSError as exc:
            await runner.cleanup()
            raise TransportError(
                f"Failed to start OIDC callback listener on {self._host}:{self._requested_port}: {exc}",
                cause=exc,
            ) from exc
        self._runner = runner
        self.port = runner.addresses[0][1]
        logger.info("vault.oidc_listener_started", host=self._host, port=self.port)

    async def _handle_callback(self, request: web.Request) -> web.StreamResponse:
        if self._result is None:
            return await self._reply(request, 503, "Login is not in progress.")
        query = request.query
        if "error" in query:
            response = await self._reply(request, 400, "Vault login failed.")
            if not self._result.done():
                self._result.set_exception(
                    OIDCCallbackError(
                        f"Identity provider returned an error: {query['error']}",
                        detail={"error": query["error"], "description": query.get("error_description", "")},
                    )
                )
            return response
        state = query.get("state")
        code = query.get("code")
        if not state or not code:
            return await self._reply(request, 400, "Missing state or code.")
        response = await self._reply(request, 200, _DONE_PAGE)
        if not self._result.done():
            self._result.set_result((state, code))
        return response

    @staticmethod
    async def _reply(request: web.Request, status: int, text: str) -> web.StreamResponse:
        # Flushed before the result resolves; the listener is torn down right after.
        response = web.Response(status=status, text=text, headers={"Connection": "close"})
        await response.prepare(request)
        await response.write_eof()
        return response

    async def wait(self) -> tuple[str, str]:
        """Wait for the redirect and return its ``(state, code)``."""
        if self._result is None:
            raise RuntimeError("CallbackListener.start() was not awaited")
        return await self._result

    async def stop(self) -> None:
        runner, self._runner = self._runner, None
        if runner is None:
            return
        if self._result is not None and not self._result.done():
            self._result.cancel()
        await runner.cleanup()
        logger.debug("vault.oidc_listener_stopped", port=self.port)


class OIDCCallback:
    """Second half of an OIDC login; owns the listener's port until closed."""

    def __init__(self, url: str, nonce: str, listener: CallbackListener) -> None:
        self.url = url
        self.nonce = nonce
        self._listener = listener

    @property
    def redirect_uri(self) -> str:
        return self._listener.redirect_uri

    @property
    def port(self) -> int:
        return self._listener.port

    async def callback(self, client: VaultClient, mount: str) -> AuthInfo:
        try:
            state, code = await self._listener.wait()
        finally:
            await self.aclose()
        return await client.auth(
            OIDCCallbackRequest(mount=mount, state=state, nonce=self.nonce, code=code)
        )

    async def aclose(self) -> None:
        """Abandon the flow and release the listener's port."""
        await self._listener.stop()

    async def __aenter__(self) -> OIDCCallback:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"OIDCCallback(url={self.url!r}, port={self.port})"


class OIDCLogin:
    """Start an OIDC login; ``port=0`` lets the OS pick a free port."""

    def __init__(self, port: int = DEFAULT_PORT, role: str | None = None) -> None:
        self.port = port
        self.role = role

    async def login(self, client: VaultClient, mount: str) -> OIDCCallback:
        listener = CallbackListener(port=self.port)
        await listener.start()
        try:
            response = await client.execute(
                OIDCAuthRequest(mount=mount, redirect_uri=listener.redirect_uri, role=self.role)
            )
            nonce = nonce_from(response.auth_url)
        except BaseException:
            await listener.stop()
            raise
        return OIDCCallback(url=response.auth_url, nonce=nonce, listener=listener)

    def __repr__(self) -> str:
        return f"OIDCLogin(port={self.port}, role={self.role!r})"


__all__ = [
    "CALLBACK_PATH",
    "DEFAULT_PORT",
    "CallbackListener",
    "OIDCCallback",
    "OIDCCallbackError",
    "OIDCLogin",
    "nonce_from",
]
