"""API – Endpoint contract and the ``@endpoint`` generator.

Every request record is a keyword-only dataclass subclassing
:class:`Endpoint` and decorated with :func:`endpoint`::

    @endpoint("{self.mount}/data/{self.path}")
    class ReadSecretRequest(Endpoint[ReadSecretResponse]):
        mount: str
        path: str
        version: int | None = query_field(default=None)

The decorator validates the declaration while the class is being defined
(unknown placeholders, non-``str`` path fields, unknown verbs and conflicting
field roles raise :class:`~vaultkit.kernel.errors.EndpointDefinitionError`),
derives the HTTP method and the field roles, and synthesizes a fluent
``<Record>Builder``.

Field roles:

* fields named in the path template, and fields declared with
  :func:`path_field`, only feed the URL path;
* :func:`query_field` fields go to the query string;
* a single :func:`raw_field` becomes the whole JSON body;
* every other field is a body field (:func:`body_field` renames it on the
  wire). ``None`` values are left out of the body.

The contract methods are prefixed with ``http_`` because ``path``, ``data``
and ``method`` are common Vault parameter names.
"""
from __future__ import annotations

import dataclasses
import enum
import json
import typing
from typing import Any, ClassVar, Generic, TypeVar

from pydantic_core import PydanticSerializationError, to_jsonable_python

from vaultkit.api.template import expand, placeholders
from vaultkit.kernel.errors import EndpointDefinitionError, SerializationError

R = TypeVar("R")
E = TypeVar("E", bound="Endpoint[Any]")

_ROLE_KEY = "vaultkit.endpoint.role"
_NAME_KEY = "vaultkit.endpoint.name"
_UNSET: Any = object()
_RESERVED_FIELDS = frozenset({"build"})


class Method(str, enum.Enum):
    """HTTP verbs understood by Vault, including the custom ``LIST``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    LIST = "LIST"

    def __str__(self) -> str:
        return self.value


class FieldRole(enum.Enum):
    BODY = "body"
    PATH = "path"
    QUERY = "query"
    RAW = "raw"


def _role_field(role: FieldRole, name: str | None = None, **kwargs: Any) -> Any:
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_ROLE_KEY] = role
    if name is not None:
        metadata[_NAME_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def path_field(**kwargs: Any) -> Any:
    """A field used only in the URL path (never serialized)."""
    return _role_field(FieldRole.PATH, **kwargs)


def query_field(*, name: str | None = None, **kwargs: Any) -> Any:
    """A field serialized into the query string."""
    return _role_field(FieldRole.QUERY, name, **kwargs)


def raw_field(**kwargs: Any) -> Any:
    """A field whose value is the entire JSON body."""
    return _role_field(FieldRole.RAW, **kwargs)


def body_field(*, name: str | None = None, **kwargs: Any) -> Any:
    """A body field, optionally sent under a different key (e.g. ``type``)."""
    return _role_field(FieldRole.BODY, name, **kwargs)


@dataclasses.dataclass(frozen=True)
class EndpointSpec:
    """What the generator derived for one record class."""

    path: str
    method: Method
    response: Any
    path_fields: tuple[str, ...]
    query_fields: tuple[tuple[str, str], ...]
    body_fields: tuple[tuple[str, str], ...]
    raw_field: str | None

    @property
    def has_body(self) -> bool:
        return bool(self.body_fields) or self.raw_field is not None


def to_jsonable(value: Any) -> Any:
    """Convert dataclasses, pydantic models and enums to JSON-able values.

    Attributes of nested records that are ``None`` are dropped.
    """
    try:
        return to_jsonable_python(value, exclude_none=True)
    except PydanticSerializationError as exc:
        raise SerializationError(
            f"Cannot serialize value of type {type(value).__name__}",
            payload_type=type(value).__name__,
            cause=exc,
        ) from exc


def _query_value(value: Any) -> list[str]:
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, enum.Enum):
        return [str(value.value)]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [v for item in value for v in _query_value(item)]
    return [str(value)]


class Endpoint(Generic[R]):
    """Contract implemented by every request record.

    ``Response`` is the type the envelope's ``data`` decodes into (``None``
    when the endpoint returns no payload).
    """

    Response: ClassVar[Any] = None
    _endpoint_spec: ClassVar[EndpointSpec]
    _builder_class: ClassVar[type[EndpointBuilder[Any]] | None] = None

    def http_method(self) -> Method:
        return self._endpoint_spec.method

    def http_path(self) -> str:
        """Return the expanded relative path."""
        return expand(self._endpoint_spec.path, self)

    def http_query(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        for attr, wire in self._endpoint_spec.query_fields:
            value = getattr(self, attr)
            if value is None:
                continue
            pairs.extend((wire, v) for v in _query_value(value))
        return pairs

    def http_data(self) -> Any:
        """Return the JSON-able body, or ``None`` when there is none."""
        spec = self._endpoint_spec
        if spec.raw_field is not None:
            value = getattr(self, spec.raw_field)
            return None if value is None else to_jsonable(value)
        if not spec.body_fields:
            return None
        payload: dict[str, Any] = {}
        for attr, wire in spec.body_fields:
            value = getattr(self, attr)
            if value is not None:
                payload[wire] = to_jsonable(value)
        return payload

    def http_body(self) -> bytes | None:
        data = self.http_data()
        if data is None:
            return None
        try:
            return json.dumps(data).encode()
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot encode body of {type(self).__name__}",
                payload_type=type(self).__name__,
                cause=exc,
            ) from exc

    @classmethod
    def builder(cls: type[E]) -> EndpointBuilder[E]:
        if cls._builder_class is None:
            raise TypeError(f"{cls.__name__} was declared without a builder")
        return cls._builder_class()


class EndpointBuilder(Generic[E]):
    """Base class of the synthesized ``<Record>Builder`` classes."""

    _record: ClassVar[type[Any]]

    def __init__(self, **values: Any) -> None:
        self._values: dict[str, Any] = dict(values)

    def build(self) -> E:
        """Return the populated record; unset optional fields keep their defaults."""
        try:
            return self._record(**self._values)
        except TypeError as exc:
            raise TypeError(f"Cannot build {self._record.__name__}: {exc}") from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._values)})"


def _make_setter(name: str, owner: str) -> Any:
    def setter(self: EndpointBuilder[Any], value: Any) -> EndpointBuilder[Any]:
        self._values[name] = value
        return self

    setter.__name__ = name
    setter.__qualname__ = f"{owner}.{name}"
    return setter


def _make_builder(cls: type[Any]) -> type[EndpointBuilder[Any]]:
    name = f"{cls.__name__}Builder"
    namespace: dict[str, Any] = {
        "__doc__": f"Fluent builder for :class:`{cls.__name__}`.",
        "__module__": cls.__module__,
        "__qualname__": f"{cls.__qualname__}Builder",
        "_record": cls,
    }
    for f in dataclasses.fields(cls):
        if f.init:
            namespace[f.name] = _make_setter(f.name, name)
    return type(name, (EndpointBuilder,), namespace)


def _resolve_method(cls: type[Any], method: str | Method | None, has_body: bool) -> Method:
    if method is None:
        return Method.POST if has_body else Method.GET
    try:
        return Method(str(method).upper())
    except ValueError as exc:
        raise EndpointDefinitionError(
            f"{cls.__name__}: unsupported HTTP method {method!r}",
            detail={"record": cls.__name__, "method": str(method)},
            cause=exc,
        ) from exc


def _resolve_response(cls: type[Any], response: Any) -> Any:
    if response is not _UNSET:
        return response
    for base in getattr(cls, "__orig_bases__", ()):
        if typing.get_origin(base) is Endpoint:
            (arg,) = typing.get_args(base)
            if arg is type(None) or isinstance(arg, TypeVar):
                return None
            return arg
    return None


def _is_str_annotation(annotation: Any) -> bool:
    return annotation is str or annotation == "str"


def endpoint(
    path: str,
    *,
    method: str | Method | None = None,
    response: Any = _UNSET,
    builder: bool = True,
) -> Any:
    """Class decorator generating the :class:`Endpoint` implementation of a record.

    Args:
        path: Path template, relative to ``/v{version}/``.
        method: HTTP verb; defaults to POST when the record has a body and to
            GET otherwise.
        response: Type of the decoded ``data`` payload; defaults to the
            parameter of the ``Endpoint[...]`` base class, else ``None``.
        builder: Also synthesize a fluent ``<Record>Builder``.
    """

    def decorate(cls: type[E]) -> type[E]:
        if not (isinstance(cls, type) and issubclass(cls, Endpoint)):
            raise EndpointDefinitionError(f"{cls!r} must subclass Endpoint")
        if not dataclasses.is_dataclass(cls):
            cls = dataclasses.dataclass(kw_only=True)(cls)

        fields = {f.name: f for f in dataclasses.fields(cls)}
        referenced = placeholders(path)
        for name in referenced:
            if name not in fields:
                raise EndpointDefinitionError(
                    f"{cls.__name__}: path template {path!r} references unknown field {name!r}",
                    detail={"record": cls.__name__, "field": name},
                )
            if not _is_str_annotation(fields[name].type):
                raise EndpointDefinitionError(
                    f"{cls.__name__}: path field {name!r} must be annotated as str",
                    detail={"record": cls.__name__, "field": name},
                )

        path_fields: list[str] = []
        query_fields: list[tuple[str, str]] = []
        body_fields: list[tuple[str, str]] = []
        raw_fields: list[str] = []
        for f in fields.values():
            if f.name in _RESERVED_FIELDS:
                raise EndpointDefinitionError(f"{cls.__name__}: field name {f.name!r} is reserved")
            role = f.metadata.get(_ROLE_KEY, FieldRole.BODY)
            wire = f.metadata.get(_NAME_KEY, f.name)
            if f.name in referenced:
                if role not in (FieldRole.BODY, FieldRole.PATH):
                    raise EndpointDefinitionError(
                        f"{cls.__name__}: field {f.name!r} is used in the path and declared {role.value}",
                    )
                role = FieldRole.PATH
            if role is FieldRole.PATH:
                path_fields.append(f.name)
            elif role is FieldRole.QUERY:
                query_fields.append((f.name, wire))
            elif role is FieldRole.RAW:
                raw_fields.append(f.name)
            else:
                body_fields.append((f.name, wire))

        if len(raw_fields) > 1 or (raw_fields and body_fields):
            raise EndpointDefinitionError(
                f"{cls.__name__}: a raw body field cannot be combined with other body fields",
                detail={"record": cls.__name__, "raw": raw_fields},
            )

        spec = EndpointSpec(
            path=path,
            method=_resolve_method(cls, method, bool(body_fields or raw_fields)),
            response=_resolve_response(cls, response),
            path_fields=tuple(path_fields),
            query_fields=tuple(query_fields),
            body_fields=tuple(body_fields),
            raw_field=raw_fields[0] if raw_fields else None,
        )
        cls._endpoint_spec = spec
        cls.Response = spec.response
        cls._builder_class = _make_builder(cls) if builder else None
        return cls

    return decorate


__all__ = [
    "Endpoint",
    "EndpointBuilder",
    "EndpointSpec",
    "FieldRole",
    "Method",
    "body_field",
    "endpoint",
    "path_field",
    "query_field",
    "raw_field",
    "to_jsonable",
]
