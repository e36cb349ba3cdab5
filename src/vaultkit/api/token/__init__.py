"""Token engine – create, look up, renew and revoke tokens."""
from vaultkit.api.token.requests import (
    CreateOrphanTokenRequest,
    CreateRoleTokenRequest,
    CreateTokenRequest,
    ListAccessorsRequest,
    LookupTokenAccessorRequest,
    LookupTokenRequest,
    LookupTokenSelfRequest,
    RenewTokenRequest,
    RenewTokenSelfRequest,
    RevokeTokenAccessorRequest,
    RevokeTokenRequest,
    RevokeTokenSelfRequest,
)
from vaultkit.api.token.responses import ListAccessorsResponse, LookupTokenResponse

__all__ = [
    "CreateOrphanTokenRequest",
    "CreateRoleTokenRequest",
    "CreateTokenRequest",
    "ListAccessorsRequest",
    "ListAccessorsResponse",
    "LookupTokenAccessorRequest",
    "LookupTokenRequest",
    "LookupTokenResponse",
    "LookupTokenSelfRequest",
    "RenewTokenRequest",
    "RenewTokenSelfRequest",
    "RevokeTokenAccessorRequest",
    "RevokeTokenRequest",
    "RevokeTokenSelfRequest",
]
