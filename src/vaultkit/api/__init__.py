"""API – Endpoint contract, envelope model and the per-engine request catalog."""
from vaultkit.api.endpoint import (
    Endpoint,
    EndpointBuilder,
    Method,
    body_field,
    endpoint,
    path_field,
    query_field,
    raw_field,
)
from vaultkit.api.envelope import EMPTY, AuthInfo, EndpointResult, WrapInfo

__all__ = [
    "EMPTY",
    "AuthInfo",
    "Endpoint",
    "EndpointBuilder",
    "EndpointResult",
    "Method",
    "WrapInfo",
    "body_field",
    "endpoint",
    "path_field",
    "query_field",
    "raw_field",
]
