"""TLS certificate auth – response models."""
from __future__ import annotations

from pydantic import BaseModel, Field

from vaultkit.api.common import KeysResponse


class ReadCaCertificateRoleResponse(BaseModel):
    allowed_common_names: list[str] | None = None
    allowed_dns_sans: list[str] | None = None
    allowed_email_sans: list[str] | None = None
    allowed_uri_sans: list[str] | None = None
    allowed_organizational_units: list[str] | None = None
    certificate: str
    display_name: str = ""
    token_bound_cidrs: list[str] = Field(default_factory=list)
    token_explicit_max_ttl: int = 0
    token_max_ttl: int = 0
    token_no_default_policy: bool = False
    token_num_uses: int = 0
    token_period: int = 0
    token_policies: list[str] = Field(default_factory=list)
    token_ttl: int = 0
    token_type: str = "default"


class ListCaCertificateRoleResponse(KeysResponse):
    pass


__all__ = ["ListCaCertificateRoleResponse", "ReadCaCertificateRoleResponse"]
