"""Infrastructure errors – transport and (de)serialisation failures."""

from __future__ import annotations

from typing import Any

from vaultkit.kernel.errors.base import VaultError


class TransportError(VaultError):
    """DNS, connect, TLS or protocol failure below the HTTP status level."""

    default_code = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.method = method
        self.url = url
        if method is not None:
            self.detail.setdefault("method", method)
        if url is not None:
            self.detail.setdefault("url", url)


class TransportTimeoutError(TransportError):
    """The request exceeded the configured transport timeout."""

    default_code = "transport_timeout"


class RequestCancelledError(TransportError):
    """The request was aborted without the awaiting task being cancelled.

    Cancelling the task itself, directly or through ``asyncio.timeout``,
    propagates the original :class:`asyncio.CancelledError` instead.
    """

    default_code = "request_cancelled"


class SerializationError(VaultError):
    """Failed to encode a request body or decode a response."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        content: str | None = None,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.content = content
        self.payload_type = payload_type
        if payload_type is not None:
            self.detail.setdefault("payload_type", payload_type)


__all__ = [
    "RequestCancelledError",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
]
