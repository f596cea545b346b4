"""High-level carryover of official progression into a local profile."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from pycarryover._api.challenges import fetch_all_challenges
from pycarryover._api.cpd import fetch_contract_progression_data
from pycarryover._api.hits import fetch_hits_category
from pycarryover._api.player_profile import fetch_player_profile
from pycarryover._api.profile import fetch_profile
from pycarryover._constants import (
    ARCADE,
    AREA_DISCOVERY_CHALLENGE_ID,
    CONTRACT_ATTACK,
    FREELANCER_MISSION_ID,
    HIT_CATEGORIES,
    MY_CONTRACTS,
    MY_HISTORY,
    MY_PLAYLIST,
    USER_DEFAULT_KIND,
    GameVersion,
)
from pycarryover._transport import Transport
from pycarryover.collaborators import ChallengeRegistry, ContractService, StateMachineEvaluator, VersionedConfigStore
from pycarryover.config import CarryoverConfig
from pycarryover.downloads import DownloadReport, apply_contract_downloads
from pycarryover.exceptions import CarryoverError, CarryoverSessionNotFoundError
from pycarryover.locations import DEFAULT_MISSION_LOCATIONS, collect_location_ids
from pycarryover.merge import merge_snapshot
from pycarryover.models.cpd import ContractProgressionPayload
from pycarryover.models.hits import Hit
from pycarryover.models.snapshot import RemoteProfileSnapshot
from pycarryover.reconstruct import reconstruct_area_discovery_challenge
from pycarryover.session import SessionProvider

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class CarryoverResult:
    """Everything one carryover produced.

    ``user_data`` is the populated profile; persisting it is up to the
    caller.
    """

    user_data: dict[str, Any]
    snapshot: RemoteProfileSnapshot
    downloads: DownloadReport


async def _probe_cpd(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    mission_id: str,
) -> ContractProgressionPayload | None:
    """Fetch CPD for *mission_id*, returning ``None`` on any carryover error."""
    try:
        return await fetch_contract_progression_data(config, transport, game_version, mission_id)
    except CarryoverError as exc:
        _logger.error("Error getting CPD for %s from official server: %s", mission_id, exc)
        return None


async def gather_official_responses(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    mission_locations: Mapping[str, Any] = DEFAULT_MISSION_LOCATIONS,
    *,
    cpd_mission_id: str = FREELANCER_MISSION_ID,
) -> RemoteProfileSnapshot:
    """Fetch every official payload a carryover needs.

    Challenge requests run concurrently; everything else runs one after
    another.  Any failure except the CPD probe aborts the run.
    """
    profile = await fetch_profile(config, transport, game_version)
    player_profile = await fetch_player_profile(config, transport, game_version)
    challenges = await fetch_all_challenges(
        config,
        transport,
        game_version,
        collect_location_ids(mission_locations),
    )

    hits: dict[str, list[Hit]] = {}
    for category in HIT_CATEGORIES:
        hits[category] = await fetch_hits_category(config, transport, game_version, category)

    cpd = {cpd_mission_id: await _probe_cpd(config, transport, game_version, cpd_mission_id)}

    return RemoteProfileSnapshot(
        profile=profile,
        player_profile=player_profile,
        challenges=challenges,
        contract_attack=hits[CONTRACT_ATTACK],
        arcade=hits[ARCADE],
        my_history=hits[MY_HISTORY],
        my_contracts=hits[MY_CONTRACTS],
        my_playlist=hits[MY_PLAYLIST],
        cpd=cpd,
    )


class CarryoverService:
    """Carries official progression over into the local save format.

    Usage::

        service = CarryoverService(
            sessions=session_store,
            config_store=config_store,
            contracts=contract_service,
            challenges=challenge_registry,
            evaluator=state_machine,
        )
        user_data = await service.carry_over_user_data(player_id, GameVersion.H3)
    """

    def __init__(
        self,
        *,
        sessions: SessionProvider,
        config_store: VersionedConfigStore,
        contracts: ContractService,
        challenges: ChallengeRegistry,
        evaluator: StateMachineEvaluator,
        config: CarryoverConfig | None = None,
        mission_locations: Mapping[str, Any] | None = None,
    ) -> None:
        self._sessions = sessions
        self._config_store = config_store
        self._contracts = contracts
        self._challenges = challenges
        self._evaluator = evaluator
        self._config = config or CarryoverConfig()
        self._mission_locations = mission_locations if mission_locations is not None else DEFAULT_MISSION_LOCATIONS

    @property
    def config(self) -> CarryoverConfig:
        return self._config

    def _require_transport(self, player_id: str) -> Transport:
        transport = self._sessions.get_transport(player_id)
        if transport is None:
            raise CarryoverSessionNotFoundError(player_id)
        return transport

    async def fetch_snapshot(self, player_id: str, game_version: GameVersion | str | None = None) -> RemoteProfileSnapshot:
        """Fetch the official payloads without touching any local state."""
        version = GameVersion.parse(game_version or self._config.game_version)
        transport = self._require_transport(player_id)
        return await gather_official_responses(self._config, transport, version, self._mission_locations)

    async def carry_over(self, player_id: str, game_version: GameVersion | str | None = None) -> CarryoverResult:
        """Fetch, merge and download; return the populated profile and reports."""
        version = GameVersion.parse(game_version or self._config.game_version)
        _logger.debug("Starting carryover for player=%s version=%s", player_id, version.value)

        snapshot = await self.fetch_snapshot(player_id, version)

        user_data = self._config_store.get_default(USER_DEFAULT_KIND, version)
        merge_snapshot(user_data, snapshot)

        entry = reconstruct_area_discovery_challenge(
            self._challenges,
            self._evaluator,
            version,
            snapshot.profile.extensions.gamepersistentdata,
        )
        challenge_progression = user_data["Extensions"]["ChallengeProgression"]
        challenge_progression[AREA_DISCOVERY_CHALLENGE_ID] = entry.to_profile_entry()

        downloads = await apply_contract_downloads(
            user_data,
            snapshot,
            self._config,
            self._contracts,
            player_id,
            version,
        )

        _logger.debug(
            "Carryover for player=%s done: %d challenges, %d contracts downloaded",
            player_id,
            len(challenge_progression),
            len(downloads.downloaded),
        )
        return CarryoverResult(user_data=user_data, snapshot=snapshot, downloads=downloads)

    async def carry_over_user_data(self, player_id: str, game_version: GameVersion | str | None = None) -> dict[str, Any]:
        """Return the local profile populated from the official backend."""
        result = await self.carry_over(player_id, game_version)
        return result.user_data


async def carry_over_user_data(
    player_id: str,
    game_version: GameVersion | str,
    *,
    sessions: SessionProvider,
    config_store: VersionedConfigStore,
    contracts: ContractService,
    challenges: ChallengeRegistry,
    evaluator: StateMachineEvaluator,
    config: CarryoverConfig | None = None,
) -> dict[str, Any]:
    """Functional wrapper around :meth:`CarryoverService.carry_over_user_data`."""
    service = CarryoverService(
        sessions=sessions,
        config_store=config_store,
        contracts=contracts,
        challenges=challenges,
        evaluator=evaluator,
        config=config,
    )
    return await service.carry_over_user_data(player_id, game_version)
