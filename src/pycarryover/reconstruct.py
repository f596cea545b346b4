"""Rebuild progress for the challenge the official backend does not track.

Challenge ``2546d4f7-…`` completes when five specific areas have been
discovered.  The official backend only stores the discovery flags (in
``PersistentBool``), so the local progress is derived by replaying one
``AreaDiscovered`` event per discovered area through the challenge's own
state machine.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

from pycarryover._constants import (
    AREA_DISCOVERED_EVENT,
    AREA_DISCOVERY_AREA_IDS,
    AREA_DISCOVERY_CHALLENGE_ID,
    DEFAULT_CHALLENGE_STATE,
    SUCCESS_STATE,
    GameVersion,
)
from pycarryover.collaborators import ChallengeRegistry, StateMachineEvaluator
from pycarryover.exceptions import CarryoverError
from pycarryover.models.challenges import ChallengeProgressEntry
from pycarryover.models.profile import GamePersistentData

_logger = logging.getLogger(__name__)


def discovered_areas(
    persistent_data: GamePersistentData,
    area_ids: Sequence[str] = AREA_DISCOVERY_AREA_IDS,
) -> list[str]:
    """Areas flagged discovered, in the order of *area_ids*."""
    return [area for area in area_ids if persistent_data.is_flag_set(area)]


def replay_area_discoveries(
    definition: dict[str, Any],
    evaluator: StateMachineEvaluator,
    areas: Sequence[str],
) -> ChallengeProgressEntry:
    """Feed one ``AreaDiscovered`` event per area through *evaluator*."""
    state = DEFAULT_CHALLENGE_STATE
    context: Any = copy.deepcopy(definition.get("Context"))

    for area in areas:
        result = evaluator.handle_event(
            definition,
            context,
            {"RepositoryId": area},
            {
                "timestamp": None,
                "eventName": AREA_DISCOVERED_EVENT,
                "currentState": state,
                "timers": [],
            },
        )
        state = result["state"]
        context = result["context"]

    return ChallengeProgressEntry(
        ticked=False,
        completed=state == SUCCESS_STATE,
        current_state=state,
        state=context,
    )


def reconstruct_area_discovery_challenge(
    registry: ChallengeRegistry,
    evaluator: StateMachineEvaluator,
    game_version: GameVersion,
    persistent_data: GamePersistentData,
    *,
    challenge_id: str = AREA_DISCOVERY_CHALLENGE_ID,
) -> ChallengeProgressEntry:
    """Derive the progress entry of the area-discovery challenge.

    Raises
    ------
    CarryoverError
        If the registry has no definition for the challenge.
    """
    challenge = registry.get_challenge_by_id(challenge_id, game_version)
    if challenge is None or not isinstance(challenge.get("Definition"), dict):
        raise CarryoverError(f"Challenge {challenge_id} has no state machine definition for {game_version.value}")

    areas = discovered_areas(persistent_data)
    _logger.debug("Replaying %d discovered areas for challenge %s", len(areas), challenge_id)
    return replay_area_discoveries(challenge["Definition"], evaluator, areas)
