"""API – response shapes shared by several engines."""
from __future__ import annotations

from pydantic import BaseModel, Field


class KeysResponse(BaseModel):
    """Payload of a ``LIST`` request: the child keys under a path."""

    keys: list[str] = Field(default_factory=list)


__all__ = ["KeysResponse"]
