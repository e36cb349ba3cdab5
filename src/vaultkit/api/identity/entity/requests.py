"""Identity entities – request records under ``identity/entity``.

Creating an entity that already exists updates it and returns 204, so
:class:`CreateEntityRequest` is usually run with ``execute_empty`` unless the
id of a new entity is needed.
"""
from __future__ import annotations

from vaultkit.api.endpoint import Endpoint, endpoint
from vaultkit.api.identity.entity.responses import (
    CreateEntityResponse,
    ListEntitiesResponse,
    ReadEntityResponse,
)


@endpoint("identity/entity")
class CreateEntityRequest(Endpoint[CreateEntityResponse]):
    name: str | None = None
    id: str | None = None
    metadata: dict[str, str] | None = None
    policies: list[str] | None = None
    disabled: bool | None = None


@endpoint("identity/entity/id/{self.id}")
class ReadEntityByIdRequest(Endpoint[ReadEntityResponse]):
    id: str


@endpoint("identity/entity/id/{self.id}")
class UpdateEntityByIdRequest(Endpoint[None]):
    id: str
    name: str | None = None
    metadata: dict[str, str] | None = None
    policies: list[str] | None = None
    disabled: bool | None = None


@endpoint("identity/entity/id/{self.id}", method="DELETE")
class DeleteEntityByIdRequest(Endpoint[None]):
    id: str


@endpoint("identity/entity/name/{self.name}")
class ReadEntityByNameRequest(Endpoint[ReadEntityResponse]):
    name: str


@endpoint("identity/entity/name/{self.name}", method="DELETE")
class DeleteEntityByNameRequest(Endpoint[None]):
    name: str


@endpoint("identity/entity/id", method="LIST")
class ListEntitiesByIdRequest(Endpoint[ListEntitiesResponse]):
    pass


@endpoint("identity/entity/name", method="LIST")
class ListEntitiesByNameRequest(Endpoint[ListEntitiesResponse]):
    pass


__all__ = [
    "CreateEntityRequest",
    "DeleteEntityByIdRequest",
    "DeleteEntityByNameRequest",
    "ListEntitiesByIdRequest",
    "ListEntitiesByNameRequest",
    "ReadEntityByIdRequest",
    "ReadEntityByNameRequest",
    "UpdateEntityByIdRequest",
]
