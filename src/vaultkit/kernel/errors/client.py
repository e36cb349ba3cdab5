"""Client errors – construction, configuration and definition failures."""

from __future__ import annotations

from typing import Any

from vaultkit.kernel.errors.base import VaultError


class ClientBuildError(VaultError):
    """The client or its settings could not be constructed."""

    default_code = "client_build_error"


class CertReadError(ClientBuildError):
    """A certificate or key file could not be read."""

    default_code = "cert_read_error"

    def __init__(self, path: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Error reading file: {path}", **kwargs)
        self.path = path
        self.detail.setdefault("path", path)


class CertParseError(ClientBuildError):
    """A certificate file is not a valid PEM encoded certificate."""

    default_code = "cert_parse_error"

    def __init__(self, path: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Error parsing certificate as PEM encoded certificate: {path}",
            **kwargs,
        )
        self.path = path
        self.detail.setdefault("path", path)


class InvalidLoginMethodError(VaultError):
    """An auth method type string is not a known login method."""

    default_code = "invalid_login_method"

    def __init__(self, method: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid login method: {method!r}", **kwargs)
        self.method = method


class EndpointDefinitionError(VaultError, TypeError):
    """An endpoint record declaration is invalid.

    Raised while the record class is being defined, so a broken declaration
    fails at import time.
    """

    default_code = "endpoint_definition_error"


__all__ = [
    "CertParseError",
    "CertReadError",
    "ClientBuildError",
    "EndpointDefinitionError",
    "InvalidLoginMethodError",
]
