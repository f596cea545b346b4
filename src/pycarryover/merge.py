"""Copy official progression into a local user profile record.

Every function here overwrites a fixed set of fields of the local
profile (a plain ``dict`` loaded from the versioned config store) and
never reads prior values except to find the containers to write into.
Remote keys that are absent leave the local default untouched.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pycarryover.models.challenges import RemoteChallenge
from pycarryover.models.cpd import ContractProgressionPayload
from pycarryover.models.hits import Hit
from pycarryover.models.player_profile import CompletionData, PlayerProfilePage
from pycarryover.models.profile import OfficialProfile
from pycarryover.models.snapshot import RemoteProfileSnapshot

_logger = logging.getLogger(__name__)

IDENTITY_KEYS: tuple[str, ...] = (
    "Id",
    "LinkedAccounts",
    "ETag",
    "Gamertag",
    "DevId",
    "SteamId",
    "StadiaId",
    "EpicId",
    "NintendoId",
    "XboxLiveId",
    "PSNAccountId",
    "PSNOnlineId",
)

PROGRESSION_KEYS: tuple[str, ...] = (
    "XPGain",
    "secondsToNextDrop",
    "secondsElapsed",
    "LastScore",
    "LastCompletedChallenge",
    "TimeDropDelta",
)

GAME_PERSISTENT_KEYS: tuple[str, ...] = (
    "IsFSPUser",
    "prologue",
    "PersistentBool",
    "VideoShown",
    "EpilogueSeen",
    "__stats",
)


class LocationShape(enum.Enum):
    """On-disk shape of one ``progression.Locations`` entry."""

    FLAT = "flat"
    """The entry is a progress record carrying ``Xp`` itself."""

    NESTED = "nested"
    """The entry maps sub-keys to progress records."""


def classify_location_record(record: Mapping[str, Any]) -> LocationShape:
    return LocationShape.FLAT if "Xp" in record else LocationShape.NESTED


def _container(parent: dict[str, Any], key: str) -> dict[str, Any]:
    """Return ``parent[key]``, creating an empty dict when missing."""
    value = parent.get(key)
    if not isinstance(value, dict):
        value = {}
        parent[key] = value
    return value


def _list_container(parent: dict[str, Any], key: str) -> list[Any]:
    value = parent.get(key)
    if not isinstance(value, list):
        value = []
        parent[key] = value
    return value


def _copy_keys(target: dict[str, Any], source: Mapping[str, Any], keys: Iterable[str]) -> None:
    for key in keys:
        if key in source:
            target[key] = source[key]


def _apply_completion(record: dict[str, Any], completion: CompletionData) -> None:
    record["Xp"] = completion.xp
    record["Level"] = completion.level
    record["PreviouslySeenXp"] = completion.xp


# ------------------------------------------------------------------
# Profile sections
# ------------------------------------------------------------------


def merge_identity(user_data: dict[str, Any], profile: OfficialProfile) -> None:
    """Copy account identity fields and the game client block."""
    _copy_keys(user_data, profile.raw, IDENTITY_KEYS)
    extensions = _container(user_data, "Extensions")
    extensions["gameclient"] = profile.extensions.gameclient


def merge_progression_counters(user_data: dict[str, Any], profile: OfficialProfile) -> None:
    progression = _container(_container(user_data, "Extensions"), "progression")
    _copy_keys(progression, profile.extensions.progression, PROGRESSION_KEYS)


def merge_sublocations(user_data: dict[str, Any], player_profile: PlayerProfilePage) -> None:
    """Overwrite XP and level of every local location the page reports.

    Flat entries are updated in place; nested entries have every child
    record updated with the same values.
    """
    # TODO: the scpc game mode stores its locations in a third shape that neither branch handles.
    locations = _container(_container(_container(user_data, "Extensions"), "progression"), "Locations")

    for sublocation in player_profile.sub_location_data:
        completion = sublocation.completion_data
        record = locations.get(completion.id)
        if not isinstance(record, dict):
            _logger.debug("No local progression slot for location %s, skipping", completion.id)
            continue

        shape = classify_location_record(record)
        if shape is LocationShape.FLAT:
            _apply_completion(record, completion)
        else:
            for child in record.values():
                if isinstance(child, dict):
                    _apply_completion(child, completion)


def merge_player_profile_xp(
    user_data: dict[str, Any],
    profile: OfficialProfile,
    player_profile: PlayerProfilePage,
) -> None:
    """Set aggregate XP/level and rebuild the sublocation XP list."""
    progression = _container(_container(user_data, "Extensions"), "progression")
    profile_xp = _container(progression, "PlayerProfileXP")
    official_xp = player_profile.player_profile_xp
    previously_seen = profile.extensions.progression.get("PlayerProfileXP")
    previously_seen = previously_seen if isinstance(previously_seen, dict) else {}

    profile_xp["Total"] = official_xp.total
    profile_xp["ProfileLevel"] = official_xp.level
    _copy_keys(profile_xp, previously_seen, ("PreviouslySeenTotal", "PreviouslySeenStaging"))

    profile_xp["Sublocations"] = [
        {"Location": location.location_id, "Xp": location.xp, "ActionXp": location.action_xp}
        for season in official_xp.seasons
        for location in season.locations
    ]


def merge_game_persistent_data(user_data: dict[str, Any], profile: OfficialProfile) -> None:
    """Copy persistent flags and restructure the menu data.

    The local schema keeps ``destinations`` twice: directly under
    ``menudata`` and, together with ``planning``, under
    ``menudata.persistentdatacomponent``.
    """
    persistent = _container(_container(user_data, "Extensions"), "gamepersistentdata")
    official = profile.extensions.gamepersistentdata.raw
    _copy_keys(persistent, official, GAME_PERSISTENT_KEYS)

    official_menu = official.get("menudata")
    official_menu = official_menu if isinstance(official_menu, dict) else {}
    menudata = _container(persistent, "menudata")
    _copy_keys(menudata, official_menu, ("newunlockables", "destinations"))
    menudata["persistentdatacomponent"] = {
        "destinations": official_menu.get("destinations"),
        "planning": official_menu.get("planning"),
    }


def merge_opportunities(user_data: dict[str, Any], profile: OfficialProfile) -> None:
    extensions = _container(user_data, "Extensions")
    extensions["opportunityprogression"] = profile.extensions.unlocked_opportunities()


def merge_social(user_data: dict[str, Any], profile: OfficialProfile) -> None:
    """Copy achievements and the friends list."""
    extensions = _container(user_data, "Extensions")
    extensions["friends"] = profile.extensions.friends
    extensions["achievements"] = profile.extensions.achievements


def merge_challenges(user_data: dict[str, Any], challenges: Iterable[RemoteChallenge]) -> dict[str, Any]:
    """Replace ``ChallengeProgression`` with the fetched challenge progress."""
    progression: dict[str, Any] = {}
    for challenge in challenges:
        progression[challenge.progression.challenge_id] = challenge.to_progress_entry().to_profile_entry()
    _container(user_data, "Extensions")["ChallengeProgression"] = progression
    return progression


def merge_escalations(user_data: dict[str, Any], hits: Iterable[Hit]) -> None:
    """Record the current level of each escalation and arcade hit."""
    extensions = _container(user_data, "Extensions")
    levels = _container(extensions, "PeacockEscalations")
    completed = _list_container(extensions, "PeacockCompletedEscalations")

    for hit in hits:
        levels[hit.id] = hit.escalation_level
        if hit.user_centric_contract.data.escalation_completed and hit.id not in completed:
            completed.append(hit.id)


def merge_cpd(user_data: dict[str, Any], cpd: Mapping[str, ContractProgressionPayload | None]) -> None:
    """Store contract progression data for every mission that returned some."""
    store = _container(_container(user_data, "Extensions"), "CPD")
    for mission_id, payload in cpd.items():
        if payload is None:
            continue
        store[mission_id] = payload.to_profile_entry()


def merge_snapshot(user_data: dict[str, Any], snapshot: RemoteProfileSnapshot) -> dict[str, Any]:
    """Apply every merge step to *user_data* in place and return it."""
    merge_identity(user_data, snapshot.profile)
    merge_progression_counters(user_data, snapshot.profile)
    merge_sublocations(user_data, snapshot.player_profile)
    merge_player_profile_xp(user_data, snapshot.profile, snapshot.player_profile)
    merge_game_persistent_data(user_data, snapshot.profile)
    merge_opportunities(user_data, snapshot.profile)
    merge_social(user_data, snapshot.profile)
    merge_challenges(user_data, snapshot.challenges.values())
    merge_escalations(user_data, snapshot.escalation_hits)
    merge_cpd(user_data, snapshot.cpd)
    return user_data
