"""Internal constants shared across the library."""

from __future__ import annotations

import enum
import re

from pycarryover.exceptions import CarryoverConfigError

REMOTE_HOST_SUFFIX = "hitman.io"
USER_AGENT = "G2 Http/1.0 (Windows NT 10.0; DX12/1; d3d12/1)"


class GameVersion(str, enum.Enum):
    """Game versions the official backend serves."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    SCPC = "scpc"

    @classmethod
    def parse(cls, value: str | GameVersion) -> GameVersion:
        """Return the member for *value*, raising :class:`CarryoverConfigError` if unknown."""
        if isinstance(value, GameVersion):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise CarryoverConfigError(f"Unknown game version: {value!r}") from exc


_REMOTE_SERVICES: dict[GameVersion, str] = {
    GameVersion.H1: "pc-service",
    GameVersion.H2: "pc2-service",
    GameVersion.H3: "hm3-service",
    GameVersion.SCPC: "hm3-service",
}


def remote_service_for(game_version: GameVersion | str) -> str:
    """Resolve the remote hostname fragment for *game_version*."""
    return _REMOTE_SERVICES[GameVersion.parse(game_version)]


# ------------------------------------------------------------------
# Official endpoint paths (relative to https://<service>.<suffix>/)
# ------------------------------------------------------------------

GET_PROFILE_PATH = "authentication/api/userchannel/ProfileService/GetProfile"
PLAYER_PROFILE_PATH = "profiles/page/PlayerProfile"
CHALLENGES_PATH = "authentication/api/userchannel/ChallengesService/GetActiveChallengesAndProgression"
HITS_CATEGORY_PATH = "profiles/page/HitsCategory"
GET_FOR_PLAY2_PATH = "authentication/api/userchannel/ContractsService/GetForPlay2"

PROFILE_REQUEST_ID = "22ebbd4b-062f-4321-81b8-03f74ab161bc"
PROFILE_EXTENSIONS: tuple[str, ...] = (
    "achievements",
    "friends",
    "gameclient",
    "gamepersistentdata",
    "opportunityprogression",
    "progression",
)
CHALLENGES_DIFFICULTY_LEVEL = 2

# Hit categories, in the order they are fetched.
CONTRACT_ATTACK = "ContractAttack"
ARCADE = "Arcade"
MY_HISTORY = "MyHistory"
MY_CONTRACTS = "MyContracts"
MY_PLAYLIST = "MyPlaylist"
HIT_CATEGORIES: tuple[str, ...] = (CONTRACT_ATTACK, ARCADE, MY_HISTORY, MY_CONTRACTS, MY_PLAYLIST)

FREELANCER_MISSION_ID = "f8ec92c2-4fa2-471e-ae08-545480c746ee"

# ------------------------------------------------------------------
# Local profile
# ------------------------------------------------------------------

USER_DEFAULT_KIND = "UserDefault"
DEFAULT_CHALLENGE_STATE = "Start"
SUCCESS_STATE = "Success"

# Official public ids look like 1-23-4567890-12 without the dashes.
PUBLIC_ID_PATTERN = re.compile(r"^[1-3]\d{2}\d{7}\d{2}$")

# ------------------------------------------------------------------
# Challenge that the official backend does not track
# ------------------------------------------------------------------

AREA_DISCOVERY_CHALLENGE_ID = "2546d4f7-191c-4858-840f-321d31aed410"
AREA_DISCOVERY_AREA_IDS: tuple[str, ...] = (
    "fa7b2877-3159-454a-82d3-422a0dd7e5da",
    "7cfd6202-b3fb-4c9f-b3c2-c892b8031901",
    "0a4513e4-338c-4328-ad72-82c1b5ff2a73",
    "705c3917-9f3d-4444-a268-41e74bc8e4ad",
    "ba0fe890-9feb-4991-82f8-5daf7aff3380",
)
AREA_DISCOVERED_EVENT = "AreaDiscovered"
