"""KV v2 helpers.

Thin async functions over :mod:`vaultkit.api.kv2`::

    await kv2.set(client, "secret", "app/db", {"password": "s3cr3t"})
    data = await kv2.read(client, "secret", "app/db")
"""
from __future__ import annotations

from typing import Any

from vaultkit.api.envelope import decode_as
from vaultkit.api.kv2 import (
    DeleteLatestSecretVersionRequest,
    DeleteSecretMetadataRequest,
    DeleteSecretVersionsRequest,
    DestroySecretVersionsRequest,
    ListSecretsRequest,
    ReadConfigurationRequest,
    ReadConfigurationResponse,
    ReadSecretMetadataRequest,
    ReadSecretMetadataResponse,
    ReadSecretRequest,
    ReadSecretResponse,
    SecretVersionMetadata,
    SetConfigurationRequest,
    SetSecretMetadataRequest,
    SetSecretOptions,
    SetSecretRequest,
    UndeleteSecretVersionsRequest,
)
from vaultkit.client import VaultClient
from vaultkit.kernel.errors import EmptyDataError


async def read(client: VaultClient, mount: str, path: str, as_type: Any = None) -> Any:
    """Return the latest version's data, validated as *as_type* when given."""
    return _data(await read_version_response(client, mount, path), as_type)


async def read_version(
    client: VaultClient, mount: str, path: str, version: int, as_type: Any = None
) -> Any:
    return _data(await read_version_response(client, mount, path, version), as_type)


async def read_version_response(
    client: VaultClient, mount: str, path: str, version: int | None = None
) -> ReadSecretResponse:
    """Return data and metadata of *version* (latest when ``None``)."""
    return await client.execute(ReadSecretRequest(mount=mount, path=path, version=version))


async def read_metadata(client: VaultClient, mount: str, path: str) -> ReadSecretMetadataResponse:
    return await client.execute(ReadSecretMetadataRequest(mount=mount, path=path))


async def set(  # noqa: A001
    client: VaultClient,
    mount: str,
    path: str,
    data: Any,
    cas: int | None = None,
) -> SecretVersionMetadata:
    """Write a new version; with *cas* the write only succeeds at that version."""
    options = SetSecretOptions(cas=cas) if cas is not None else None
    return await client.execute(SetSecretRequest(mount=mount, path=path, data=data, options=options))


async def set_metadata(
    client: VaultClient,
    mount: str,
    path: str,
    *,
    max_versions: int | None = None,
    cas_required: bool | None = None,
    delete_version_after: str | None = None,
    custom_metadata: dict[str, str] | None = None,
) -> None:
    await client.execute(
        SetSecretMetadataRequest(
            mount=mount,
            path=path,
            max_versions=max_versions,
            cas_required=cas_required,
            delete_version_after=delete_version_after,
            custom_metadata=custom_metadata,
        )
    )


async def list(client: VaultClient, mount: str, path: str) -> list[str]:  # noqa: A001
    response = await client.execute(ListSecretsRequest(mount=mount, path=path))
    return response.keys


async def delete_latest(client: VaultClient, mount: str, path: str) -> None:
    """Soft-delete the latest version."""
    await client.execute_empty(DeleteLatestSecretVersionRequest(mount=mount, path=path))


async def delete_versions(client: VaultClient, mount: str, path: str, versions: list[int]) -> None:
    await client.execute_empty(DeleteSecretVersionsRequest(mount=mount, path=path, versions=versions))


async def undelete_versions(client: VaultClient, mount: str, path: str, versions: list[int]) -> None:
    await client.execute_empty(UndeleteSecretVersionsRequest(mount=mount, path=path, versions=versions))


async def destroy_versions(client: VaultClient, mount: str, path: str, versions: list[int]) -> None:
    """Permanently remove the data of *versions*."""
    await client.execute_empty(DestroySecretVersionsRequest(mount=mount, path=path, versions=versions))


async def delete_metadata(client: VaultClient, mount: str, path: str) -> None:
    """Remove the key together with every version."""
    await client.execute_empty(DeleteSecretMetadataRequest(mount=mount, path=path))


async def read_config(client: VaultClient, mount: str) -> ReadConfigurationResponse:
    return await client.execute(ReadConfigurationRequest(mount=mount))


async def set_config(
    client: VaultClient,
    mount: str,
    *,
    max_versions: int | None = None,
    cas_required: bool | None = None,
    delete_version_after: str | None = None,
) -> None:
    await client.execute(
        SetConfigurationRequest(
            mount=mount,
            max_versions=max_versions,
            cas_required=cas_required,
            delete_version_after=delete_version_after,
        )
    )


def _data(response: ReadSecretResponse, as_type: Any) -> Any:
    if response.data is None:
        raise EmptyDataError(
            f"Version {response.metadata.version} has no data",
            detail={"version": response.metadata.version, "destroyed": response.metadata.destroyed},
        )
    if as_type is None:
        return response.data
    return decode_as(response.data, as_type)


__all__ = [
    "delete_latest",
    "delete_metadata",
    "delete_versions",
    "destroy_versions",
    "list",
    "read",
    "read_config",
    "read_metadata",
    "read_version",
    "read_version_response",
    "set",
    "set_config",
    "set_metadata",
    "undelete_versions",
]
