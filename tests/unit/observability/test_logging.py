"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from vaultkit.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_default_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"client_token": "hvs.abc", "mount": "approle", "secret_id": "s"})
        assert result == {"client_token": "[REDACTED]", "mount": "approle", "secret_id": "[REDACTED]"}

    def test_key_match_is_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"X-Vault-Token": "t"}) == {"X-Vault-Token": "[REDACTED]"}

    def test_redact_deep(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact_deep({"auth": {"client_token": "t", "policies": ["default"]}, "level": "info"})
        assert result == {"auth": {"client_token": "[REDACTED]", "policies": ["default"]}, "level": "info"}

    def test_custom_fields_replace_defaults(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"pin"}))
        assert f.redact({"pin": "1234", "password": "pw"}) == {"pin": "[REDACTED]", "password": "pw"}

    def test_acts_as_processor(self) -> None:
        f = SensitiveFieldsFilter()
        assert f(None, "info", {"event": "x", "jwt": "eyJ"}) == {"event": "x", "jwt": "[REDACTED]"}

    def test_defaults_cover_login_secrets(self) -> None:
        assert {"token", "secret_id", "password", "code", "nonce"} <= DEFAULT_SENSITIVE_FIELDS


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_json_lines_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging()
        get_logger("vaultkit.tests").info("vault.login", mount="approle", client_token="hvs.abc")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "vault.login"
        assert record["mount"] == "approle"
        assert record["client_token"] == "[REDACTED]"
        assert record["level"] == "info"
        assert record["logger"] == "vaultkit.tests"
        assert "timestamp" in record

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.WARNING)
        log = get_logger("vaultkit.tests")
        log.info("vault.quiet")
        log.warning("vault.response_warnings", warnings=["deprecated"])
        err = capsys.readouterr().err
        assert "vault.quiet" not in err
        assert "vault.response_warnings" in err

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json=False)
        get_logger("vaultkit.tests").info("vault.status", state="ok")
        assert "vault.status" in capsys.readouterr().err

    def test_bound_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging()
        get_logger("vaultkit.tests", address="http://vault.test:8200").info("vault.request")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["address"] == "http://vault.test:8200"

    def test_context_bound_secrets_are_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging()
        structlog.contextvars.bind_contextvars(client_token="hvs.ctx", mount="approle")
        get_logger("vaultkit.tests").info("vault.login")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["client_token"] == "[REDACTED]"
        assert record["mount"] == "approle"
