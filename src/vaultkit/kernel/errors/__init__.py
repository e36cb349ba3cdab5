"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    VaultError
    ├── APIError                 (api.py)
    ├── EmptyResponseError
    ├── EmptyDataError
    ├── ResponseWrapError
    ├── WrapInvalidError
    ├── TransportError           (infrastructure.py)
    │   ├── TransportTimeoutError
    │   └── RequestCancelledError
    ├── SerializationError
    ├── ClientBuildError         (client.py)
    │   ├── CertReadError
    │   └── CertParseError
    ├── InvalidLoginMethodError
    └── EndpointDefinitionError
"""

from vaultkit.kernel.errors.api import (
    APIError,
    EmptyDataError,
    EmptyResponseError,
    ResponseWrapError,
    WrapInvalidError,
)
from vaultkit.kernel.errors.base import VaultError
from vaultkit.kernel.errors.client import (
    CertParseError,
    CertReadError,
    ClientBuildError,
    EndpointDefinitionError,
    InvalidLoginMethodError,
)
from vaultkit.kernel.errors.infrastructure import (
    RequestCancelledError,
    SerializationError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "APIError",
    "CertParseError",
    "CertReadError",
    "ClientBuildError",
    "EmptyDataError",
    "EmptyResponseError",
    "EndpointDefinitionError",
    "InvalidLoginMethodError",
    "RequestCancelledError",
    "ResponseWrapError",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
    "VaultError",
    "WrapInvalidError",
]
