"""KV v1 engine – response models."""
from __future__ import annotations

from vaultkit.api.common import KeysResponse


class ListSecretResponse(KeysResponse):
    pass


__all__ = ["ListSecretResponse"]
