"""KV v2 engine – request records.

Every path is relative to the engine mount: ``{mount}/data/{path}`` for
secret versions, ``{mount}/metadata/{path}`` for the key's metadata.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from vaultkit.api.endpoint import Endpoint, endpoint, query_field
from vaultkit.api.kv2.responses import (
    ListSecretsResponse,
    ReadConfigurationResponse,
    ReadSecretMetadataResponse,
    ReadSecretResponse,
    SecretVersionMetadata,
)


@dataclasses.dataclass(kw_only=True)
class SetSecretOptions:
    """``options`` of a write; ``cas=0`` only writes when the key does not exist."""

    cas: int | None = None


@endpoint("{self.mount}/config")
class SetConfigurationRequest(Endpoint[None]):
    mount: str
    max_versions: int | None = None
    cas_required: bool | None = None
    delete_version_after: str | None = None


@endpoint("{self.mount}/config")
class ReadConfigurationRequest(Endpoint[ReadConfigurationResponse]):
    mount: str


@endpoint("{self.mount}/data/{self.path}")
class ReadSecretRequest(Endpoint[ReadSecretResponse]):
    mount: str
    path: str
    version: int | None = query_field(default=None)


@endpoint("{self.mount}/data/{self.path}")
class SetSecretRequest(Endpoint[SecretVersionMetadata]):
    mount: str
    path: str
    data: Any
    options: SetSecretOptions | None = None


@endpoint("{self.mount}/data/{self.path}", method="DELETE")
class DeleteLatestSecretVersionRequest(Endpoint[None]):
    mount: str
    path: str


@endpoint("{self.mount}/delete/{self.path}")
class DeleteSecretVersionsRequest(Endpoint[None]):
    mount: str
    path: str
    versions: list[int]


@endpoint("{self.mount}/undelete/{self.path}")
class UndeleteSecretVersionsRequest(Endpoint[None]):
    mount: str
    path: str
    versions: list[int]


@endpoint("{self.mount}/destroy/{self.path}")
class DestroySecretVersionsRequest(Endpoint[None]):
    mount: str
    path: str
    versions: list[int]


@endpoint("{self.mount}/metadata/{self.path}", method="LIST")
class ListSecretsRequest(Endpoint[ListSecretsResponse]):
    mount: str
    path: str


@endpoint("{self.mount}/metadata/{self.path}")
class ReadSecretMetadataRequest(Endpoint[ReadSecretMetadataResponse]):
    mount: str
    path: str


@endpoint("{self.mount}/metadata/{self.path}")
class SetSecretMetadataRequest(Endpoint[None]):
    mount: str
    path: str
    max_versions: int | None = None
    cas_required: bool | None = None
    delete_version_after: str | None = None
    custom_metadata: dict[str, str] | None = None


@endpoint("{self.mount}/metadata/{self.path}", method="DELETE")
class DeleteSecretMetadataRequest(Endpoint[None]):
    mount: str
    path: str


__all__ = [
    "DeleteLatestSecretVersionRequest",
    "DeleteSecretMetadataRequest",
    "DeleteSecretVersionsRequest",
    "DestroySecretVersionsRequest",
    "ListSecretsRequest",
    "ReadConfigurationRequest",
    "ReadSecretMetadataRequest",
    "ReadSecretRequest",
    "SetConfigurationRequest",
    "SetSecretMetadataRequest",
    "SetSecretOptions",
    "SetSecretRequest",
    "UndeleteSecretVersionsRequest",
]
