"""Identity entities – response models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from vaultkit.api.common import KeysResponse


class CreateEntityResponse(BaseModel):
    id: str
    name: str = ""
    aliases: list[Any] | None = None


class ReadEntityResponse(BaseModel):
    id: str
    name: str
    aliases: list[dict[str, Any]] = Field(default_factory=list)
    creation_time: str = ""
    last_update_time: str = ""
    direct_group_ids: list[str] = Field(default_factory=list)
    group_ids: list[str] = Field(default_factory=list)
    inherited_group_ids: list[str] = Field(default_factory=list)
    merged_entity_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
    policies: list[str] = Field(default_factory=list)
    disabled: bool = False
    namespace_id: str = ""


class ListEntitiesResponse(KeysResponse):
    pass


__all__ = ["CreateEntityResponse", "ListEntitiesResponse", "ReadEntityResponse"]
