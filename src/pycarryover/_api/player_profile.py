"""Player profile page endpoint: profiles/page/PlayerProfile."""

from __future__ import annotations

from pycarryover._api._common import build_url, call_checked
from pycarryover._constants import PLAYER_PROFILE_PATH, GameVersion
from pycarryover._transport import Transport
from pycarryover.config import CarryoverConfig
from pycarryover.models.player_profile import PlayerProfilePage


async def fetch_player_profile(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
) -> PlayerProfilePage:
    """Fetch sublocation completion and aggregate XP."""
    body = await call_checked(
        transport,
        build_url(config, game_version, PLAYER_PROFILE_PATH),
        use_get=True,
        message="Error getting player profile from official server.",
    )
    data = body.get("data") if isinstance(body, dict) else None
    return PlayerProfilePage.model_validate(data if isinstance(data, dict) else {})
