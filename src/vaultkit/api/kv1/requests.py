"""KV v1 engine – request records.

A v1 secret's body is the secret map itself, so :class:`SetSecretRequest`
declares it as a raw field.
"""
from __future__ import annotations

from typing import Any

from vaultkit.api.endpoint import Endpoint, endpoint, raw_field
from vaultkit.api.kv1.responses import ListSecretResponse


@endpoint("{self.mount}/{self.path}", method="POST")
class SetSecretRequest(Endpoint[None]):
    mount: str
    path: str
    data: dict[str, Any] = raw_field()


@endpoint("{self.mount}/{self.path}")
class GetSecretRequest(Endpoint[dict[str, Any]]):
    mount: str
    path: str


@endpoint("{self.mount}/{self.path}", method="LIST")
class ListSecretRequest(Endpoint[ListSecretResponse]):
    mount: str
    path: str


@endpoint("{self.mount}/{self.path}", method="DELETE")
class DeleteSecretRequest(Endpoint[None]):
    mount: str
    path: str


__all__ = ["DeleteSecretRequest", "GetSecretRequest", "ListSecretRequest", "SetSecretRequest"]
