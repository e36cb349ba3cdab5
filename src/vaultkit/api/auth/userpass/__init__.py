"""Userpass auth method."""
from vaultkit.api.auth.userpass.requests import (
    CreateUserRequest,
    DeleteUserRequest,
    ListUsersRequest,
    LoginRequest,
    ReadUserRequest,
    UpdatePasswordRequest,
    UpdatePoliciesRequest,
)
from vaultkit.api.auth.userpass.responses import ListUsersResponse, ReadUserResponse

__all__ = [
    "CreateUserRequest",
    "DeleteUserRequest",
    "ListUsersRequest",
    "ListUsersResponse",
    "LoginRequest",
    "ReadUserRequest",
    "ReadUserResponse",
    "UpdatePasswordRequest",
    "UpdatePoliciesRequest",
]
