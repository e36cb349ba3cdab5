"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import asyncio
import json

import pytest

from vaultkit.kernel.errors import (
    APIError,
    CertParseError,
    CertReadError,
    ClientBuildError,
    EmptyDataError,
    EmptyResponseError,
    EndpointDefinitionError,
    InvalidLoginMethodError,
    RequestCancelledError,
    ResponseWrapError,
    SerializationError,
    TransportError,
    TransportTimeoutError,
    VaultError,
    WrapInvalidError,
)


class TestVaultError:
    def test_message_is_stored(self) -> None:
        err = VaultError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert VaultError("m").code == "vault_error"

    def test_custom_code(self) -> None:
        assert VaultError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = VaultError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = VaultError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert VaultError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(VaultError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(VaultError("m")) == "VaultError(code='vault_error', message='m')"


class TestAPIError:
    def test_message_joins_errors(self) -> None:
        err = APIError(403, ["permission denied", "1 error occurred"])
        assert err.status == 403
        assert err.message == "Vault returned HTTP 403: permission denied; 1 error occurred"

    def test_no_errors(self) -> None:
        err = APIError(404)
        assert err.errors == []
        assert err.message == "Vault returned HTTP 404"

    def test_detail_carries_status_and_url(self) -> None:
        err = APIError(500, ["boom"], url="http://vault.test:8200/v1/secret/data/x")
        assert err.detail == {
            "status": 500,
            "errors": ["boom"],
            "url": "http://vault.test:8200/v1/secret/data/x",
        }

    def test_raw_only_when_errors_unparsed(self) -> None:
        assert APIError(502, raw="<html>bad gateway</html>").to_dict()["raw"] == "<html>bad gateway</html>"
        assert "raw" not in APIError(400, ["x"], raw='{"errors":["x"]}').to_dict()


class TestFixedMessages:
    @pytest.mark.parametrize(
        "cls, code",
        [
            (EmptyResponseError, "empty_response"),
            (EmptyDataError, "empty_data"),
            (ResponseWrapError, "response_wrap_error"),
            (WrapInvalidError, "wrap_invalid"),
        ],
    )
    def test_defaults(self, cls: type[VaultError], code: str) -> None:
        err = cls()  # type: ignore[call-arg]
        assert err.code == code
        assert err.message
        assert isinstance(err, VaultError)


class TestClientErrors:
    def test_cert_read(self) -> None:
        err = CertReadError("/etc/ca.pem", cause=FileNotFoundError("/etc/ca.pem"))
        assert isinstance(err, ClientBuildError)
        assert err.detail["path"] == "/etc/ca.pem"
        assert "Error reading file" in err.message

    def test_cert_parse(self) -> None:
        err = CertParseError("/etc/ca.pem")
        assert err.code == "cert_parse_error"
        assert err.path == "/etc/ca.pem"

    def test_invalid_login_method(self) -> None:
        err = InvalidLoginMethodError("nope")
        assert err.method == "nope"
        assert "'nope'" in err.message

    def test_endpoint_definition_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise EndpointDefinitionError("bad record")


class TestInfrastructureErrors:
    def test_transport_detail(self) -> None:
        err = TransportError("refused", method="GET", url="http://x/v1/sys/health")
        assert err.detail == {"method": "GET", "url": "http://x/v1/sys/health"}

    def test_timeout_is_transport(self) -> None:
        assert issubclass(TransportTimeoutError, TransportError)

    def test_cancelled_is_a_plain_transport_error(self) -> None:
        err = RequestCancelledError("cancelled", method="GET")
        assert isinstance(err, TransportError)
        assert not isinstance(err, asyncio.CancelledError)

    def test_serialization_keeps_content(self) -> None:
        err = SerializationError("bad json", content="{", payload_type="ReadSecretResponse")
        assert err.content == "{"
        assert err.detail == {"payload_type": "ReadSecretResponse"}
