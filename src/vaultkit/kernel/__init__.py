"""Kernel – framework-agnostic building blocks shared by every layer."""

from vaultkit.kernel.errors import (
    APIError,
    ClientBuildError,
    EmptyDataError,
    EmptyResponseError,
    SerializationError,
    TransportError,
    VaultError,
    WrapInvalidError,
)

__all__ = [
    "APIError",
    "ClientBuildError",
    "EmptyDataError",
    "EmptyResponseError",
    "SerializationError",
    "TransportError",
    "VaultError",
    "WrapInvalidError",
]
