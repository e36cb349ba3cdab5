"""Identity entities."""
from vaultkit.api.identity.entity.requests import (
    CreateEntityRequest,
    DeleteEntityByIdRequest,
    DeleteEntityByNameRequest,
    ListEntitiesByIdRequest,
    ListEntitiesByNameRequest,
    ReadEntityByIdRequest,
    ReadEntityByNameRequest,
    UpdateEntityByIdRequest,
)
from vaultkit.api.identity.entity.responses import (
    CreateEntityResponse,
    ListEntitiesResponse,
    ReadEntityResponse,
)

__all__ = [
    "CreateEntityRequest",
    "CreateEntityResponse",
    "DeleteEntityByIdRequest",
    "DeleteEntityByNameRequest",
    "ListEntitiesByIdRequest",
    "ListEntitiesByNameRequest",
    "ListEntitiesResponse",
    "ReadEntityByIdRequest",
    "ReadEntityByNameRequest",
    "ReadEntityResponse",
    "UpdateEntityByIdRequest",
]
