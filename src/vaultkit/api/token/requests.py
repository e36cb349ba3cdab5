"""Token engine – request records under ``auth/token``.

Token-creating and renewing endpoints return their result in the envelope's
``auth`` block; run them with :meth:`vaultkit.client.VaultClient.auth`.
"""
from __future__ import annotations

from vaultkit.api.endpoint import Endpoint, body_field, endpoint
from vaultkit.api.token.responses import ListAccessorsResponse, LookupTokenResponse


@endpoint("auth/token/create")
class CreateTokenRequest(Endpoint[None]):
    id: str | None = None
    role_name: str | None = None
    policies: list[str] | None = None
    meta: dict[str, str] | None = None
    no_parent: bool | None = None
    no_default_policy: bool | None = None
    renewable: bool | None = None
    ttl: str | None = None
    token_type: str | None = body_field(name="type", default=None)
    explicit_max_ttl: str | None = None
    display_name: str | None = None
    num_uses: int | None = None
    period: str | None = None
    entity_alias: str | None = None


@endpoint("auth/token/create-orphan")
class CreateOrphanTokenRequest(Endpoint[None]):
    id: str | None = None
    policies: list[str] | None = None
    meta: dict[str, str] | None = None
    no_default_policy: bool | None = None
    renewable: bool | None = None
    ttl: str | None = None
    token_type: str | None = body_field(name="type", default=None)
    explicit_max_ttl: str | None = None
    display_name: str | None = None
    num_uses: int | None = None
    period: str | None = None


@endpoint("auth/token/create/{self.role_name}")
class CreateRoleTokenRequest(Endpoint[None]):
    role_name: str
    meta: dict[str, str] | None = None
    renewable: bool | None = None
    ttl: str | None = None
    display_name: str | None = None
    num_uses: int | None = None


@endpoint("auth/token/lookup-self")
class LookupTokenSelfRequest(Endpoint[LookupTokenResponse]):
    pass


@endpoint("auth/token/lookup")
class LookupTokenRequest(Endpoint[LookupTokenResponse]):
    token: str


@endpoint("auth/token/lookup-accessor")
class LookupTokenAccessorRequest(Endpoint[LookupTokenResponse]):
    accessor: str


@endpoint("auth/token/renew-self", method="POST")
class RenewTokenSelfRequest(Endpoint[None]):
    increment: str | None = None


@endpoint("auth/token/renew")
class RenewTokenRequest(Endpoint[None]):
    token: str
    increment: str | None = None


@endpoint("auth/token/revoke-self", method="POST")
class RevokeTokenSelfRequest(Endpoint[None]):
    pass


@endpoint("auth/token/revoke")
class RevokeTokenRequest(Endpoint[None]):
    token: str


@endpoint("auth/token/revoke-accessor")
class RevokeTokenAccessorRequest(Endpoint[None]):
    accessor: str


@endpoint("auth/token/accessors", method="LIST")
class ListAccessorsRequest(Endpoint[ListAccessorsResponse]):
    pass


__all__ = [
    "CreateOrphanTokenRequest",
    "CreateRoleTokenRequest",
    "CreateTokenRequest",
    "ListAccessorsRequest",
    "LookupTokenAccessorRequest",
    "LookupTokenRequest",
    "LookupTokenSelfRequest",
    "RenewTokenRequest",
    "RenewTokenSelfRequest",
    "RevokeTokenAccessorRequest",
    "RevokeTokenRequest",
    "RevokeTokenSelfRequest",
]
