"""Token engine – response models."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from vaultkit.api.common import KeysResponse


class LookupTokenResponse(BaseModel):
    """Token properties returned by ``lookup``/``lookup-self``.

    ``id`` is the token itself and is left out of ``repr``.
    """

    model_config = ConfigDict(populate_by_name=True)

    accessor: str = ""
    creation_time: int = 0
    creation_ttl: int = 0
    display_name: str = ""
    entity_id: str = ""
    expire_time: str | None = None
    explicit_max_ttl: int = 0
    id: str = Field(default="", repr=False)
    identity_policies: list[str] | None = None
    issue_time: str | None = None
    meta: dict[str, str] | None = None
    num_uses: int = 0
    orphan: bool = False
    path: str = ""
    policies: list[str] = Field(default_factory=list)
    renewable: bool | None = None
    ttl: int = 0
    token_type: str = Field(default="", alias="type")


class ListAccessorsResponse(KeysResponse):
    pass


__all__ = ["ListAccessorsResponse", "LookupTokenResponse"]
