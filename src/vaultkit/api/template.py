"""API – path template expansion.

Templates such as ``/auth/{self.mount}/role/{self.role_name}`` name fields of
the request record. ``self.`` is optional sugar; ``{mount}`` reads the same
field.

Values are substituted verbatim and are **not** percent-encoded: Vault path
segments may legitimately contain ``/`` (a KV secret path like ``a/b``).
Callers embedding untrusted input in a path field must make sure it is
URL-safe themselves.
"""
from __future__ import annotations

import re
from typing import Any

from vaultkit.kernel.errors import EndpointDefinitionError

_PLACEHOLDER_RE = re.compile(r"\{(.*?)\}")
_SELF_PREFIX = "self."


def _field_name(placeholder: str, template: str) -> str:
    name = placeholder.strip()
    if name.startswith(_SELF_PREFIX):
        name = name[len(_SELF_PREFIX):]
    if not name.isidentifier():
        raise EndpointDefinitionError(
            f"Failed parsing placeholder {{{placeholder}}} in path template {template!r}",
            detail={"template": template, "placeholder": placeholder},
        )
    return name


def placeholders(template: str) -> list[str]:
    """Return the field names referenced by *template*, in order of appearance."""
    return [_field_name(p, template) for p in _PLACEHOLDER_RE.findall(template)]


def expand(template: str, record: Any) -> str:
    """Substitute every placeholder in *template* with the field of *record*."""

    def _sub(match: re.Match[str]) -> str:
        return str(getattr(record, _field_name(match.group(1), template)))

    return _PLACEHOLDER_RE.sub(_sub, template)


__all__ = ["expand", "placeholders"]
