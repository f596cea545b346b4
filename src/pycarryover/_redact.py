"""Redaction of official-server payloads before they reach DEBUG logs.

Request bodies are mostly ids and flags, but GetProfile responses and
the transport headers carry the bearer token and the player's linked
platform accounts.  Those values are replaced with ``<redacted>``; long
blobs (challenge state, hit listings) are shortened so one request does
not flood the log.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_REDACTED = "<redacted>"
_MAX_DEPTH = 20

# Compared case-insensitively against mapping keys.
_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        # Transport credentials
        "authorization",
        "access_token",
        "accesstoken",
        "refresh_token",
        "refreshtoken",
        "token",
        "cookie",
        "password",
        # GetProfile identity block
        "steamid",
        "epicid",
        "stadiaid",
        "nintendoid",
        "psnaccountid",
        "psnonlineid",
        "xboxliveid",
        "linkedaccounts",
    }
)


def _redact_mapping(value: Mapping[Any, Any], max_string: int, max_items: int, depth: int) -> dict[str, Any]:
    return {
        str(key): _REDACTED
        if str(key).lower() in _SENSITIVE_VALUE_KEYS
        else _redact(item, max_string, max_items, depth + 1)
        for key, item in value.items()
    }


def _redact_sequence(value: Sequence[Any], max_string: int, max_items: int, depth: int) -> list[Any]:
    items = [_redact(item, max_string, max_items, depth + 1) for item in list(value)[:max_items]]
    hidden = len(value) - max_items
    if hidden > 0:
        items.append(f"<{hidden} more>")
    return items


def _redact(value: Any, max_string: int, max_items: int, depth: int) -> Any:
    if depth > _MAX_DEPTH:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"
    if isinstance(value, Mapping):
        return _redact_mapping(value, max_string, max_items, depth)
    if isinstance(value, Sequence):
        return _redact_sequence(value, max_string, max_items, depth)
    return repr(value)


def redact_for_log(value: Any, *, max_string: int = 512, max_items: int = 50) -> Any:
    """Return a copy of *value* that is safe to log.

    Parameters
    ----------
    value : Any
        Request body, response body or header mapping.
    max_string : int
        Strings longer than this are cut and marked ``<truncated>``.
    max_items : int
        Lists longer than this keep their first items plus a
        ``<N more>`` marker.

    Returns
    -------
    Any
        Plain dicts, lists and scalars; unknown objects become their
        ``repr``.
    """
    return _redact(value, max_string, max_items, 0)
