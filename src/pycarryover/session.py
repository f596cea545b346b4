"""Official-server session state and lookup by player id."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from pycarryover._transport import Transport

_logger = logging.getLogger(__name__)

#: Default session token time-to-live in seconds (one hour).
#: Official access tokens are short lived; the game refreshes them on
#: its own schedule and the local server only sees the latest one.
DEFAULT_SESSION_TTL: float = 3600


class OfficialSession(BaseModel):
    """Authenticated official-server session for one player.

    Parameters
    ----------
    player_id : str
        Local player id the session belongs to.
    access_token : str
        Bearer token issued by the official authentication service.
    client_version : str
        Game client version string forwarded in the ``Version`` header.
    created_at : float
        Monotonic timestamp (``time.monotonic()``) when the session
        was created.  Defaults to *now* if not provided.
    ttl : float
        Time-to-live in seconds.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    player_id: str
    access_token: str
    client_version: str = ""
    created_at: float = Field(default_factory=time.monotonic)
    ttl: float = DEFAULT_SESSION_TTL

    @property
    def is_expired(self) -> bool:
        """Whether the session has exceeded its TTL."""
        return (time.monotonic() - self.created_at) >= self.ttl

    @property
    def age(self) -> float:
        """Seconds since the session was created."""
        return time.monotonic() - self.created_at


class SessionProvider(Protocol):
    """Looks up the authenticated transport for a player."""

    def get_transport(self, player_id: str) -> Transport | None:
        ...


class InMemorySessionStore:
    """Simple :class:`SessionProvider` keeping one transport per player.

    Expired sessions are dropped on lookup.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[OfficialSession, Transport]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, session: OfficialSession, transport: Transport) -> None:
        self._entries[session.player_id] = (session, transport)

    def remove(self, player_id: str) -> None:
        self._entries.pop(player_id, None)

    def get_transport(self, player_id: str) -> Transport | None:
        entry = self._entries.get(player_id)
        if entry is None:
            return None
        session, transport = entry
        if session.is_expired:
            _logger.debug("Official session for player=%s expired after %.0fs", player_id, session.age)
            self.remove(player_id)
            return None
        return transport
