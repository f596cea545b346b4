"""Download contracts referenced by the player's hit listings.

Downloads are best effort: contracts already known locally are skipped,
public ids in an unsupported format are skipped, and a failing download
is logged without stopping the others.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from typing import Any

from pycarryover._constants import PUBLIC_ID_PATTERN, GameVersion
from pycarryover.collaborators import ContractService
from pycarryover.config import CarryoverConfig
from pycarryover.models.hits import Hit
from pycarryover.models.snapshot import RemoteProfileSnapshot

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class DownloadSelection:
    """Hits chosen for download, per category, after toggles and limits."""

    my_history: list[Hit] = dataclasses.field(default_factory=list)
    my_contracts: list[Hit] = dataclasses.field(default_factory=list)
    my_playlist: list[Hit] = dataclasses.field(default_factory=list)

    def ordered(self) -> list[Hit]:
        """Hits in download order: own contracts, favourites, then history."""
        return [*self.my_contracts, *self.my_playlist, *self.my_history]

    def favorites(self) -> list[Hit]:
        return [*self.my_contracts, *self.my_playlist]


@dataclasses.dataclass
class DownloadReport:
    """Outcome of one download pass, as public ids (or contract ids when known)."""

    downloaded: list[str] = dataclasses.field(default_factory=list)
    skipped_known: list[str] = dataclasses.field(default_factory=list)
    skipped_invalid: list[str] = dataclasses.field(default_factory=list)
    failed: list[str] = dataclasses.field(default_factory=list)


def is_supported_public_id(public_id: str | None) -> bool:
    return public_id is not None and PUBLIC_ID_PATTERN.fullmatch(public_id) is not None


def select_hits_for_download(snapshot: RemoteProfileSnapshot, config: CarryoverConfig) -> DownloadSelection:
    """Apply the download toggles and the own-contracts limit."""
    my_contracts = list(snapshot.my_contracts) if config.download_my_contracts else []
    limit = config.download_contract_history_limit
    if limit != 0:
        my_contracts = my_contracts[:limit]

    return DownloadSelection(
        my_history=list(snapshot.my_history) if config.download_contract_history else [],
        my_contracts=my_contracts,
        my_playlist=list(snapshot.my_playlist) if config.download_favorites else [],
    )


async def download_contracts(
    hits: Iterable[Hit],
    contracts: ContractService,
    player_id: str,
    game_version: GameVersion,
) -> DownloadReport:
    """Download every hit's contract that is not known locally yet."""
    report = DownloadReport()

    for hit in hits:
        if contracts.resolve(hit.id):
            report.skipped_known.append(hit.id)
            continue

        public_id = hit.user_centric_contract.public_id
        if public_id is None or not is_supported_public_id(public_id):
            _logger.info("Skipping contract %s because it is not supported.", public_id)
            report.skipped_invalid.append(str(public_id))
            continue

        try:
            await contracts.download(player_id, public_id, game_version)
        except Exception as exc:
            _logger.error("Error downloading contract %s: %s", public_id, exc)
            report.failed.append(public_id)
            continue
        report.downloaded.append(public_id)

    _logger.debug(
        "Contract downloads: %d downloaded, %d known, %d unsupported, %d failed",
        len(report.downloaded),
        len(report.skipped_known),
        len(report.skipped_invalid),
        len(report.failed),
    )
    return report


def record_played_contracts(user_data: dict[str, Any], history: Iterable[Hit]) -> None:
    """Record history hits in ``PeacockPlayedContracts``."""
    extensions = user_data.setdefault("Extensions", {})
    played = extensions.setdefault("PeacockPlayedContracts", {})
    for hit in history:
        data = hit.user_centric_contract.data
        played[hit.id] = {
            "LastPlayedAt": data.last_played_at_ms,
            "Completed": data.completed,
            "IsEscalation": False,
        }


def record_favorite_contracts(user_data: dict[str, Any], hits: Iterable[Hit]) -> None:
    extensions = user_data.setdefault("Extensions", {})
    favorites = extensions.setdefault("PeacockFavoriteContracts", [])
    for hit in hits:
        if hit.id not in favorites:
            favorites.append(hit.id)


async def apply_contract_downloads(
    user_data: dict[str, Any],
    snapshot: RemoteProfileSnapshot,
    config: CarryoverConfig,
    contracts: ContractService,
    player_id: str,
    game_version: GameVersion,
) -> DownloadReport:
    """Download selected contracts and record played/favourite lists."""
    selection = select_hits_for_download(snapshot, config)
    report = await download_contracts(selection.ordered(), contracts, player_id, game_version)

    if config.download_contract_history:
        record_played_contracts(user_data, snapshot.my_history)
    record_favorite_contracts(user_data, selection.favorites())
    return report
