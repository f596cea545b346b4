"""Hits category endpoint: profiles/page/HitsCategory (paginated)."""

from __future__ import annotations

import logging

from pycarryover._api._common import build_url, call_checked
from pycarryover._constants import HITS_CATEGORY_PATH, GameVersion
from pycarryover._transport import Transport
from pycarryover.config import CarryoverConfig
from pycarryover.models.hits import Hit, HitsCategoryPage

_logger = logging.getLogger(__name__)


async def fetch_hits_category_page(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    category: str,
    page: int,
) -> HitsCategoryPage:
    """Fetch one page of a hit category."""
    url = build_url(
        config,
        game_version,
        HITS_CATEGORY_PATH,
        {"page": page, "type": category, "mode": "dataonly"},
    )
    body = await call_checked(
        transport,
        url,
        use_get=True,
        message=f"Error getting {category} hits (page {page}) from official server.",
    )
    data = body.get("data") if isinstance(body, dict) else None
    return HitsCategoryPage.model_validate(data if isinstance(data, dict) else {})


async def fetch_hits_category(
    config: CarryoverConfig,
    transport: Transport,
    game_version: GameVersion,
    category: str,
) -> list[Hit]:
    """Fetch every page of *category*, starting at page 0, until ``HasMore`` is false."""
    hits: list[Hit] = []
    page = 0
    has_more = True

    while has_more:
        response = await fetch_hits_category_page(config, transport, game_version, category, page)
        hits.extend(response.data.hits)
        has_more = response.data.has_more
        page += 1

    _logger.debug("Fetched %d %s hits over %d pages", len(hits), category, page)
    return hits
