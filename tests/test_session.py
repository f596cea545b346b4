from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

import pytest

from pycarryover._transport import ServiceResponse
from pycarryover.session import InMemorySessionStore, OfficialSession


class _NullTransport:
    async def call(self, endpoint: str, use_get: bool, body: Mapping[str, Any] | None = None) -> ServiceResponse:
        return ServiceResponse(status=200, data=None, endpoint=endpoint)


def test_lookup_returns_registered_transport() -> None:
    store = InMemorySessionStore()
    transport = _NullTransport()
    store.add(OfficialSession(player_id="p-1", access_token="tok"), transport)

    assert store.get_transport("p-1") is transport
    assert store.get_transport("p-2") is None
    assert len(store) == 1


def test_expired_session_is_dropped() -> None:
    store = InMemorySessionStore()
    session = OfficialSession(player_id="p-1", access_token="tok", created_at=time.monotonic() - 10, ttl=5)
    store.add(session, _NullTransport())

    assert session.is_expired is True
    assert store.get_transport("p-1") is None
    assert len(store) == 0


def test_remove_is_idempotent() -> None:
    store = InMemorySessionStore()
    store.add(OfficialSession(player_id="p-1", access_token="tok"), _NullTransport())

    store.remove("p-1")
    store.remove("p-1")

    assert store.get_transport("p-1") is None


def test_session_is_frozen() -> None:
    session = OfficialSession(player_id=" p-1 ", access_token="tok")
    assert session.player_id == "p-1"
    with pytest.raises(ValueError):
        session.access_token = "other"  # type: ignore[misc]
