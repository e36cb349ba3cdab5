"""Unit tests – request records of the bundled engines and auth methods."""
from __future__ import annotations

import pytest

from vaultkit.api.auth import approle, cert, kubernetes, oidc, userpass
from vaultkit.api.endpoint import Endpoint, Method
from vaultkit.api.identity import entity
from vaultkit.api.kv1 import GetSecretRequest, ListSecretRequest
from vaultkit.api.kv2 import (
    DestroySecretVersionsRequest,
    ReadSecretMetadataRequest,
    SetConfigurationRequest,
)
from vaultkit.api.sys import (
    EnableAuthRequest,
    ListAuthsRequest,
    ListPoliciesRequest,
    ReadMountConfigRequest,
    UnwrapRequest,
    WrappingLookupRequest,
)
from vaultkit.api.token import (
    CreateTokenRequest,
    ListAccessorsRequest,
    LookupTokenSelfRequest,
    RenewTokenSelfRequest,
    RevokeTokenSelfRequest,
)


@pytest.mark.parametrize(
    ("request_", "method", "path"),
    [
        (GetSecretRequest(mount="kv", path="a/b"), Method.GET, "kv/a/b"),
        (ListSecretRequest(mount="kv", path="a"), Method.LIST, "kv/a"),
        (SetConfigurationRequest(mount="secret", max_versions=5), Method.POST, "secret/config"),
        (ReadSecretMetadataRequest(mount="secret", path="x"), Method.GET, "secret/metadata/x"),
        (DestroySecretVersionsRequest(mount="secret", path="x", versions=[1]), Method.POST, "secret/destroy/x"),
        (EnableAuthRequest(path="approle", auth_type="approle"), Method.POST, "sys/auth/approle"),
        (ListAuthsRequest(), Method.GET, "sys/auth"),
        (ReadMountConfigRequest(path="secret"), Method.GET, "sys/mounts/secret/tune"),
        (ListPoliciesRequest(), Method.LIST, "sys/policies/acl"),
        (WrappingLookupRequest(token="t"), Method.POST, "sys/wrapping/lookup"),
        (UnwrapRequest(), Method.POST, "sys/wrapping/unwrap"),
        (LookupTokenSelfRequest(), Method.GET, "auth/token/lookup-self"),
        (RenewTokenSelfRequest(), Method.POST, "auth/token/renew-self"),
        (RevokeTokenSelfRequest(), Method.POST, "auth/token/revoke-self"),
        (ListAccessorsRequest(), Method.LIST, "auth/token/accessors"),
        (CreateTokenRequest(policies=["dev"]), Method.POST, "auth/token/create"),
        (approle.LoginWithAppRoleRequest(mount="approle", role_id="r"), Method.POST, "auth/approle/login"),
        (approle.ListRolesRequest(mount="approle"), Method.LIST, "auth/approle/role"),
        (
            approle.GenerateNewSecretIDRequest(mount="approle", role_name="app"),
            Method.POST,
            "auth/approle/role/app/secret-id",
        ),
        (userpass.LoginRequest(mount="up", username="bob", password="p"), Method.POST, "auth/up/login/bob"),
        (userpass.ListUsersRequest(mount="up"), Method.LIST, "auth/up/users"),
        (oidc.OIDCAuthRequest(mount="oidc", redirect_uri="http://x"), Method.POST, "auth/oidc/oidc/auth_url"),
        (kubernetes.LoginWithKubernetesRequest(mount="k8s", role="r", jwt="j"), Method.POST, "auth/k8s/login"),
        (cert.LoginRequest(mount="cert"), Method.POST, "auth/cert/login"),
        (entity.ReadEntityByNameRequest(name="bob"), Method.GET, "identity/entity/name/bob"),
        (entity.ListEntitiesByIdRequest(), Method.LIST, "identity/entity/id"),
    ],
)
def test_method_and_path(request_: Endpoint, method: Method, path: str) -> None:
    assert request_.http_method() is method
    assert request_.http_path() == path


class TestBodies:
    def test_approle_login_omits_missing_secret_id(self) -> None:
        request = approle.LoginWithAppRoleRequest(mount="approle", role_id="r")
        assert request.http_data() == {"role_id": "r"}

    def test_userpass_password_is_in_body_username_in_path(self) -> None:
        request = userpass.LoginRequest(mount="up", username="bob", password="p")
        assert request.http_data() == {"password": "p"}

    def test_enable_auth_sends_type(self) -> None:
        request = EnableAuthRequest(path="up", auth_type="userpass", description="people")
        assert request.http_data() == {"type": "userpass", "description": "people"}

    def test_token_type_is_renamed(self) -> None:
        assert CreateTokenRequest(token_type="batch").http_data() == {"type": "batch"}

    def test_cert_login_without_name_has_empty_body(self) -> None:
        assert cert.LoginRequest(mount="cert").http_data() == {}

    def test_revoke_self_has_no_body(self) -> None:
        assert RevokeTokenSelfRequest().http_body() is None


class TestOIDCCallback:
    def test_code_state_nonce_in_query(self) -> None:
        request = oidc.OIDCCallbackRequest(mount="oidc", state="s", nonce="n", code="c")
        assert request.http_method() is Method.GET
        assert request.http_path() == "auth/oidc/oidc/callback"
        assert request.http_query() == [("state", "s"), ("nonce", "n"), ("code", "c")]
        assert request.http_body() is None

    def test_client_nonce_optional(self) -> None:
        request = oidc.OIDCCallbackRequest(mount="oidc", state="s", nonce="n", code="c", client_nonce="cn")
        assert ("client_nonce", "cn") in request.http_query()
