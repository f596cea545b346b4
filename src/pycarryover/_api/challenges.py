"""Challenge progress endpoint.

Endpoint:
  - authentication/api/userchannel/ChallengesService/GetActiveChallengesAndProgression

There is no endpoint returning every challenge at once, so one request is
made per mission location and the requests run concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from pycarryover._api._common import build_url, raise_for_status
from pycarryover._constants import CHALLENGES_DIFFICULTY_LEVEL, CHALLENGES_PATH, GameVersion
from pycarryover._transport import ServiceResponse, Transport
from pycarryover.config import CarryoverConfig
from pycarryover.exceptions import CarryoverError, CarryoverFetchError
from pycarryover.models.challenges import RemoteChallenge

_logger = logging.getLogger(__name__)


def _build_challenges_body(location_id: str) -> dict[str, Any]:
    return {
        "contractId": location_id,
        "difficultyLevel": CHALLENGES_DIFFICULTY_LEVEL,
    }


async def fetch_location_challenges(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    location_id: str,
) -> ServiceResponse:
    """Request challenge progress for one location.

    The response is returned unchecked; :func:`fetch_all_challenges`
    decides what a failure means for the whole batch.
    """
    return await transport.call(
        build_url(config, game_version, CHALLENGES_PATH),
        False,
        _build_challenges_body(location_id),
    )


def parse_challenges(data: Any) -> list[RemoteChallenge]:
    items = data if isinstance(data, list) else []
    return [RemoteChallenge.model_validate(item) for item in items if isinstance(item, dict)]


async def fetch_all_challenges(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    location_ids: Sequence[str],
) -> dict[str, RemoteChallenge]:
    """Fetch challenge progress for every location concurrently.

    Returns
    -------
    dict[str, RemoteChallenge]
        Challenges keyed by challenge id; when a challenge appears for
        more than one location the last response wins.

    Raises
    ------
    CarryoverFetchError
        If any request fails or answers with a non-success status.  The
        error names the offending location.
    """
    total = len(location_ids)
    requests = []
    for index, location_id in enumerate(location_ids, start=1):
        _logger.debug("Getting map challenges for %s (%d/%d)", location_id, index, total)
        requests.append(fetch_location_challenges(config, transport, game_version, location_id))

    try:
        responses = await asyncio.gather(*requests)
    except CarryoverError as exc:
        raise CarryoverFetchError(
            f"Error getting map challenges from official server: {exc}",
            status_code=getattr(exc, "status_code", None),
            endpoint=getattr(exc, "endpoint", ""),
        ) from exc

    challenges: dict[str, RemoteChallenge] = {}
    for location_id, response in zip(location_ids, responses, strict=True):
        raise_for_status(
            response,
            f"Error getting map challenges from official server. ({location_id})",
            location_id=location_id,
        )
        for challenge in parse_challenges(response.data):
            challenges[challenge.challenge.id] = challenge

    _logger.debug("Fetched %d challenges across %d locations", len(challenges), total)
    return challenges
