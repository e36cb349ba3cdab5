"""API – translate non-2xx responses into :class:`APIError`."""
from __future__ import annotations

import json

from vaultkit.kernel.errors import APIError
from vaultkit.observability.logging import get_logger

logger = get_logger(__name__)


def parse_errors(content: bytes) -> list[str] | None:
    """Return the messages of a ``{"errors": [...]}`` body, or ``None``."""
    try:
        payload = json.loads(content)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return None
    return [str(e) for e in errors]


def classify(status: int, content: bytes, *, url: str | None = None) -> APIError:
    """Build the :class:`APIError` for a non-2xx HTTP status."""
    errors = parse_errors(content)
    raw = None
    if errors is None:
        errors = []
        raw = content.decode("utf-8", errors="replace") or None
    logger.error("vault.api_error", status=status, errors=errors, url=url)
    return APIError(status, errors, raw=raw, url=url)


def is_error(status: int) -> bool:
    """Anything outside 2xx once redirects have been followed."""
    return not 200 <= status < 300


__all__ = ["classify", "is_error", "parse_errors"]
