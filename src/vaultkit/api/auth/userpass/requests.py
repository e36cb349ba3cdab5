"""Userpass auth – request records."""
from __future__ import annotations

from vaultkit.api.auth.userpass.responses import ListUsersResponse, ReadUserResponse
from vaultkit.api.endpoint import Endpoint, endpoint


@endpoint("auth/{self.mount}/login/{self.username}")
class LoginRequest(Endpoint[None]):
    mount: str
    username: str
    password: str


@endpoint("auth/{self.mount}/users/{self.username}")
class CreateUserRequest(Endpoint[None]):
    mount: str
    username: str
    password: str
    token_bound_cidrs: list[str] | None = None
    token_explicit_max_ttl: str | None = None
    token_max_ttl: str | None = None
    token_no_default_policy: bool | None = None
    token_num_uses: int | None = None
    token_period: str | None = None
    token_policies: list[str] | None = None
    token_ttl: str | None = None
    token_type: str | None = None


@endpoint("auth/{self.mount}/users/{self.username}")
class ReadUserRequest(Endpoint[ReadUserResponse]):
    mount: str
    username: str


@endpoint("auth/{self.mount}/users/{self.username}", method="DELETE")
class DeleteUserRequest(Endpoint[None]):
    mount: str
    username: str


@endpoint("auth/{self.mount}/users", method="LIST")
class ListUsersRequest(Endpoint[ListUsersResponse]):
    mount: str


@endpoint("auth/{self.mount}/users/{self.username}/password")
class UpdatePasswordRequest(Endpoint[None]):
    mount: str
    username: str
    password: str


@endpoint("auth/{self.mount}/users/{self.username}/policies")
class UpdatePoliciesRequest(Endpoint[None]):
    mount: str
    username: str
    token_policies: list[str]


__all__ = [
    "CreateUserRequest",
    "DeleteUserRequest",
    "ListUsersRequest",
    "LoginRequest",
    "ReadUserRequest",
    "UpdatePasswordRequest",
    "UpdatePoliciesRequest",
]
