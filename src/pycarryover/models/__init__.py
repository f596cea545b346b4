"""Pydantic models for official-server payloads and carryover results."""

from pycarryover.models.challenges import (
    ChallengeInfo,
    ChallengeProgression,
    ChallengeProgressEntry,
    RemoteChallenge,
)
from pycarryover.models.cpd import ContractProgressionPayload
from pycarryover.models.hits import Hit, HitsCategoryData, HitsCategoryPage, UserCentricContract, UserCentricData
from pycarryover.models.player_profile import (
    CompletionData,
    PlayerProfilePage,
    PlayerProfileXp,
    Season,
    SeasonLocation,
    SubLocationData,
)
from pycarryover.models.profile import GamePersistentData, OfficialProfile, ProfileExtensions
from pycarryover.models.snapshot import RemoteProfileSnapshot

__all__ = [
    "ChallengeInfo",
    "ChallengeProgressEntry",
    "ChallengeProgression",
    "CompletionData",
    "ContractProgressionPayload",
    "GamePersistentData",
    "Hit",
    "HitsCategoryData",
    "HitsCategoryPage",
    "OfficialProfile",
    "PlayerProfilePage",
    "PlayerProfileXp",
    "ProfileExtensions",
    "RemoteChallenge",
    "RemoteProfileSnapshot",
    "Season",
    "SeasonLocation",
    "SubLocationData",
    "UserCentricContract",
    "UserCentricData",
]
