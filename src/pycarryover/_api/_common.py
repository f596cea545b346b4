"""Shared helpers for official-server endpoint modules.

This module centralizes the most repeated patterns:
- building endpoint URLs for a game version
- sending a request and checking its status

It is internal to pycarryover and may change at any time.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pycarryover._constants import GameVersion, remote_service_for
from pycarryover._transport import ServiceResponse, Transport
from pycarryover.config import CarryoverConfig
from pycarryover.exceptions import CarryoverFetchError


def build_url(
    config: CarryoverConfig,
    game_version: GameVersion | str,
    path: str,
    query: Mapping[str, Any] | None = None,
) -> str:
    """Build ``https://<service>.<suffix>/<path>[?query]`` for *game_version*."""
    url = f"https://{remote_service_for(game_version)}.{config.remote_host_suffix}/{path}"
    if query:
        url = f"{url}?{urlencode(query)}"
    return url


def raise_for_status(response: ServiceResponse, message: str, *, location_id: str | None = None) -> None:
    """Raise :class:`CarryoverFetchError` unless *response* is a success."""
    if response.ok:
        return
    raise CarryoverFetchError(
        f"{message} (HTTP {response.status} from {response.endpoint})",
        status_code=response.status,
        endpoint=response.endpoint,
        location_id=location_id,
    )


async def call_checked(
    transport: Transport,
    url: str,
    *,
    use_get: bool,
    message: str,
    body: Mapping[str, Any] | None = None,
) -> Any:
    """Send a request and return its decoded body, raising on non-success.

    This is a thin helper for endpoint modules; it intentionally returns `Any`
    since official endpoints may return objects or lists.
    """
    response = await transport.call(url, use_get, body)
    raise_for_status(response, message)
    return response.data
