"""KV v2 engine – response models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from vaultkit.api.common import KeysResponse


class ReadConfigurationResponse(BaseModel):
    cas_required: bool = False
    delete_version_after: str = "0s"
    max_versions: int = 0


class SecretVersionMetadata(BaseModel):
    """Metadata of a single secret version.

    ``deletion_time`` is empty unless the version was soft-deleted.
    """

    created_time: str
    custom_metadata: dict[str, str] | None = None
    deletion_time: str = ""
    destroyed: bool = False
    version: int


class ReadSecretResponse(BaseModel):
    """``data`` is ``None`` for a deleted or destroyed version."""

    data: dict[str, Any] | None = None
    metadata: SecretVersionMetadata


class SecretMetadataVersion(BaseModel):
    created_time: str
    deletion_time: str = ""
    destroyed: bool = False


class ReadSecretMetadataResponse(BaseModel):
    cas_required: bool = False
    created_time: str
    current_version: int
    custom_metadata: dict[str, str] | None = None
    delete_version_after: str = "0s"
    max_versions: int = 0
    oldest_version: int = 0
    updated_time: str
    versions: dict[str, SecretMetadataVersion] = Field(default_factory=dict)


class ListSecretsResponse(KeysResponse):
    pass


__all__ = [
    "ListSecretsResponse",
    "ReadConfigurationResponse",
    "ReadSecretMetadataResponse",
    "ReadSecretResponse",
    "SecretMetadataVersion",
    "SecretVersionMetadata",
]
