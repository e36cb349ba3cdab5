"""KV v1 engine – unversioned key/value secrets."""
from vaultkit.api.kv1.requests import (
    DeleteSecretRequest,
    GetSecretRequest,
    ListSecretRequest,
    SetSecretRequest,
)
from vaultkit.api.kv1.responses import ListSecretResponse

__all__ = [
    "DeleteSecretRequest",
    "GetSecretRequest",
    "ListSecretRequest",
    "ListSecretResponse",
    "SetSecretRequest",
]
