"""API – the response envelope Vault wraps successful results in.

Most endpoints return::

    {"request_id": "...", "lease_id": "", "renewable": false,
     "lease_duration": 0, "data": {...}, "wrap_info": null,
     "warnings": null, "auth": null}

:func:`decode_response` implements the decision table used by the client:
204 or an empty body yields :data:`EMPTY`, a ``wrap_info`` block yields a
:class:`WrapInfo`, anything else yields ``data`` decoded as the endpoint's
response type. Warnings are logged, never returned.
"""
from __future__ import annotations

import functools
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from vaultkit.kernel.errors import EmptyDataError, ResponseWrapError, SerializationError
from vaultkit.observability.logging import get_logger

logger = get_logger(__name__)


class WrapInfo(BaseModel):
    """The ``wrap_info`` block of a wrapped response."""

    model_config = ConfigDict(frozen=True)

    token: str
    accessor: str = ""
    ttl: int
    creation_time: str
    creation_path: str
    wrapped_accessor: str | None = None


class AuthInfo(BaseModel):
    """The ``auth`` block returned by login and token-creating endpoints."""

    client_token: str
    accessor: str = ""
    policies: list[str] = Field(default_factory=list)
    token_policies: list[str] = Field(default_factory=list)
    metadata: dict[str, str] | None = None
    lease_duration: int = 0
    renewable: bool = False
    entity_id: str = ""
    token_type: str = ""
    orphan: bool = False

    def __repr__(self) -> str:
        return (
            f"AuthInfo(accessor={self.accessor!r}, policies={self.policies!r}, "
            f"lease_duration={self.lease_duration!r}, renewable={self.renewable!r})"
        )


class EndpointResult(BaseModel):
    """The outer envelope of a successful response."""

    request_id: str = ""
    lease_id: str = ""
    renewable: bool = False
    lease_duration: int = 0
    data: Any = None
    auth: AuthInfo | None = None
    wrap_info: WrapInfo | None = None
    warnings: list[str] | None = None


class _Empty:
    """Sentinel for a 204 / empty-bodied success."""

    _instance: _Empty | None = None

    def __new__(cls) -> _Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY = _Empty()


@functools.lru_cache(maxsize=512)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", repr(response_type))


def _text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def decode_as(value: Any, response_type: Any) -> Any:
    """Validate an already-parsed JSON value as *response_type*."""
    try:
        return _adapter(response_type).validate_python(value)
    except ValidationError as exc:
        raise SerializationError(
            f"Error parsing response data as {_type_name(response_type)}",
            payload_type=_type_name(response_type),
            cause=exc,
        ) from exc


def parse_envelope(content: bytes) -> EndpointResult:
    """Parse raw bytes into an :class:`EndpointResult`."""
    try:
        return EndpointResult.model_validate_json(content)
    except ValidationError as exc:
        raise SerializationError(
            "Error parsing response envelope",
            content=_text(content),
            payload_type="EndpointResult",
            cause=exc,
        ) from exc


def log_warnings(result: EndpointResult) -> None:
    if result.warnings:
        logger.warning("vault.response_warnings", warnings=result.warnings, request_id=result.request_id)


def strip(result: EndpointResult) -> Any:
    """Drop the envelope, logging warnings, and return the raw ``data``."""
    log_warnings(result)
    return result.data


def strip_wrap(result: EndpointResult) -> WrapInfo:
    """Return the ``wrap_info`` of a wrapped response."""
    log_warnings(result)
    if result.wrap_info is None:
        raise ResponseWrapError()
    return result.wrap_info


def is_empty(status: int, content: bytes) -> bool:
    return status == 204 or not content.strip()


def decode_response(status: int, content: bytes, response_type: Any) -> Any:
    """Decode a 2xx response according to the envelope decision table.

    Returns :data:`EMPTY` for 204 / empty bodies, a :class:`WrapInfo` when the
    server wrapped the response, ``None`` when *response_type* is ``None``,
    and otherwise ``data`` validated as *response_type*.
    """
    if is_empty(status, content):
        return EMPTY
    result = parse_envelope(content)
    if result.wrap_info is not None:
        log_warnings(result)
        return result.wrap_info
    data = strip(result)
    if response_type is None:
        return None
    if data is None:
        raise EmptyDataError()
    return decode_as(data, response_type)


def decode_plain(content: bytes, response_type: Any) -> Any:
    """Decode a body that is not wrapped in an envelope (e.g. ``sys/health``)."""
    if response_type is None:
        return None
    try:
        return _adapter(response_type).validate_json(content)
    except ValidationError as exc:
        raise SerializationError(
            f"Error parsing response as {_type_name(response_type)}",
            content=_text(content),
            payload_type=_type_name(response_type),
            cause=exc,
        ) from exc


__all__ = [
    "EMPTY",
    "AuthInfo",
    "EndpointResult",
    "WrapInfo",
    "decode_as",
    "decode_plain",
    "decode_response",
    "is_empty",
    "parse_envelope",
    "strip",
    "strip_wrap",
]
