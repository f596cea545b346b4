"""Contract progression data endpoint.

Endpoint:
  - authentication/api/userchannel/ContractsService/GetForPlay2

Used to probe the freelancer campaign state.  The backend rejects this
call often; callers are expected to tolerate failure.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pycarryover._api._common import build_url, call_checked
from pycarryover._constants import GET_FOR_PLAY2_PATH, GameVersion
from pycarryover._transport import Transport
from pycarryover.config import CarryoverConfig
from pycarryover.exceptions import CarryoverFetchError
from pycarryover.models.cpd import ContractProgressionPayload

_logger = logging.getLogger(__name__)


def _build_get_for_play_body(mission_id: str) -> dict[str, Any]:
    return {
        "id": mission_id,
        "locationId": "",
        "extraGameChangerIds": [],
        "difficultyLevel": 0,
    }


async def fetch_contract_progression_data(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    mission_id: str,
) -> ContractProgressionPayload:
    """Fetch contract progression data for *mission_id*.

    Raises
    ------
    CarryoverFetchError
        If the backend answers with a non-success status or a body that
        does not decode as contract progression data.
    """
    url = build_url(config, game_version, GET_FOR_PLAY2_PATH)
    _logger.debug("Getting CPD for mission %s from official server", mission_id)
    data = await call_checked(
        transport,
        url,
        use_get=False,
        body=_build_get_for_play_body(mission_id),
        message=f"Error getting CPD for {mission_id} from official server.",
    )
    try:
        return ContractProgressionPayload.model_validate(data if isinstance(data, dict) else {})
    except ValidationError as exc:
        raise CarryoverFetchError(
            f"Unexpected CPD body for {mission_id} from official server: {exc.error_count()} errors",
            status_code=200,
            endpoint=url,
        ) from exc
