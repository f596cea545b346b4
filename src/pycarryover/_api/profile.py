"""Profile endpoint.

Endpoint:
  - authentication/api/userchannel/ProfileService/GetProfile
"""

from __future__ import annotations

import logging
from typing import Any

from pycarryover._api._common import build_url, call_checked
from pycarryover._constants import GET_PROFILE_PATH, PROFILE_EXTENSIONS, PROFILE_REQUEST_ID, GameVersion
from pycarryover._transport import Transport
from pycarryover.config import CarryoverConfig
from pycarryover.models.profile import OfficialProfile

_logger = logging.getLogger(__name__)


def _build_profile_body() -> dict[str, Any]:
    return {
        "id": PROFILE_REQUEST_ID,
        "extensions": list(PROFILE_EXTENSIONS),
    }


async def fetch_profile(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
) -> OfficialProfile:
    """Fetch the player's profile with all carried-over extensions.

    Raises
    ------
    CarryoverFetchError
        If the backend answers with a non-success status.
    """
    data = await call_checked(
        transport,
        build_url(config, game_version, GET_PROFILE_PATH),
        use_get=False,
        body=_build_profile_body(),
        message="Error getting user profile from official server.",
    )
    profile = OfficialProfile.model_validate(data if isinstance(data, dict) else {})
    _logger.debug("Profile fetched id=%s extensions=%s", profile.id, sorted(profile.extensions.raw))
    return profile
