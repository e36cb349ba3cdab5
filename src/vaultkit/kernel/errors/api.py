"""API errors – failures reported by the Vault server or its response shape."""

from __future__ import annotations

from typing import Any

from vaultkit.kernel.errors.base import VaultError


class APIError(VaultError):
    """The server replied with a non-2xx HTTP status.

    ``errors`` holds the messages from the ``{"errors": [...]}`` body and is
    empty when the body could not be parsed; the raw body is then kept in
    ``raw`` for diagnostics.
    """

    default_code = "api_error"

    def __init__(
        self,
        status: int,
        errors: list[str] | None = None,
        *,
        raw: str | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.status = status
        self.errors: list[str] = list(errors or [])
        self.raw = raw
        self.url = url
        message = f"Vault returned HTTP {status}"
        if self.errors:
            message = f"{message}: {'; '.join(self.errors)}"
        detail = {"status": status, "errors": self.errors}
        if url is not None:
            detail["url"] = url
        super().__init__(message, detail=detail, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.raw and not self.errors:
            base["raw"] = self.raw
        return base


class EmptyResponseError(VaultError):
    """A payload was expected but the server sent a 204 or an empty body."""

    default_code = "empty_response"

    def __init__(self, message: str = "The request returned an empty response", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class EmptyDataError(VaultError):
    """The envelope was present but its ``data`` field was absent."""

    default_code = "empty_data"

    def __init__(self, message: str = "The result contained an empty data field", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ResponseWrapError(VaultError):
    """A wrapped request came back without ``wrap_info``."""

    default_code = "response_wrap_error"

    def __init__(self, message: str = "Error parsing response wrapping result", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class WrapInvalidError(VaultError):
    """The wrapping token has expired or was already unwrapped."""

    default_code = "wrap_invalid"

    def __init__(
        self,
        message: str = "The wrapped response doesn't exist or is no longer valid",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "APIError",
    "EmptyDataError",
    "EmptyResponseError",
    "ResponseWrapError",
    "WrapInvalidError",
]
