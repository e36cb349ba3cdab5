"""KV v2 engine – versioned key/value secrets."""
from vaultkit.api.kv2.requests import (
    DeleteLatestSecretVersionRequest,
    DeleteSecretMetadataRequest,
    DeleteSecretVersionsRequest,
    DestroySecretVersionsRequest,
    ListSecretsRequest,
    ReadConfigurationRequest,
    ReadSecretMetadataRequest,
    ReadSecretRequest,
    SetConfigurationRequest,
    SetSecretMetadataRequest,
    SetSecretOptions,
    SetSecretRequest,
    UndeleteSecretVersionsRequest,
)
from vaultkit.api.kv2.responses import (
    ListSecretsResponse,
    ReadConfigurationResponse,
    ReadSecretMetadataResponse,
    ReadSecretResponse,
    SecretMetadataVersion,
    SecretVersionMetadata,
)

__all__ = [
    "DeleteLatestSecretVersionRequest",
    "DeleteSecretMetadataRequest",
    "DeleteSecretVersionsRequest",
    "DestroySecretVersionsRequest",
    "ListSecretsRequest",
    "ListSecretsResponse",
    "ReadConfigurationRequest",
    "ReadConfigurationResponse",
    "ReadSecretMetadataRequest",
    "ReadSecretMetadataResponse",
    "ReadSecretRequest",
    "ReadSecretResponse",
    "SecretMetadataVersion",
    "SecretVersionMetadata",
    "SetConfigurationRequest",
    "SetSecretMetadataRequest",
    "SetSecretOptions",
    "SetSecretRequest",
    "UndeleteSecretVersionsRequest",
]
