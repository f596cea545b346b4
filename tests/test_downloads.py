from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from pycarryover._constants import GameVersion
from pycarryover.config import CarryoverConfig
from pycarryover.downloads import (
    apply_contract_downloads,
    download_contracts,
    is_supported_public_id,
    select_hits_for_download,
)
from pycarryover.exceptions import ContractDownloadError
from pycarryover.models import Hit, OfficialProfile, PlayerProfilePage, RemoteProfileSnapshot


def _hit(hit_id: str, public_id: str | None = None, **data: Any) -> Hit:
    contract = {"Metadata": {"PublicId": public_id}} if public_id is not None else {}
    return Hit.model_validate({"Id": hit_id, "UserCentricContract": {"Data": data, "Contract": contract}})


def _snapshot(
    *,
    my_history: list[Hit] | None = None,
    my_contracts: list[Hit] | None = None,
    my_playlist: list[Hit] | None = None,
) -> RemoteProfileSnapshot:
    return RemoteProfileSnapshot(
        profile=OfficialProfile(id="p-1"),
        player_profile=PlayerProfilePage(),
        my_history=my_history or [],
        my_contracts=my_contracts or [],
        my_playlist=my_playlist or [],
    )


@dataclass
class _FakeContracts:
    known: set[str] = field(default_factory=set)
    failing: set[str] = field(default_factory=set)
    downloaded: list[str] = field(default_factory=list)

    def resolve(self, contract_id: str) -> bool:
        return contract_id in self.known

    async def download(self, player_id: str, public_id: str, game_version: GameVersion) -> None:
        if public_id in self.failing:
            raise ContractDownloadError("not found", public_id=public_id)
        self.downloaded.append(public_id)


@pytest.mark.parametrize(
    ("public_id", "expected"),
    [
        ("112345678901", True),
        ("212345678901", True),
        ("312345678901", True),
        ("412345678901", False),
        ("11234567890", False),
        ("1123456789012", False),
        ("1a2345678901", False),
        ("112345678901\n", False),
        (" 112345678901", False),
        (None, False),
    ],
)
def test_is_supported_public_id(public_id: str | None, expected: bool) -> None:
    assert is_supported_public_id(public_id) is expected


def test_limit_zero_keeps_all_own_contracts() -> None:
    snapshot = _snapshot(my_contracts=[_hit(f"c-{i}") for i in range(4)])

    selection = select_hits_for_download(snapshot, CarryoverConfig(download_contract_history_limit=0))

    assert [hit.id for hit in selection.my_contracts] == ["c-0", "c-1", "c-2", "c-3"]


def test_limit_truncates_own_contracts() -> None:
    snapshot = _snapshot(my_contracts=[_hit(f"c-{i}") for i in range(4)], my_history=[_hit("h-1")])

    selection = select_hits_for_download(snapshot, CarryoverConfig(download_contract_history_limit=2))

    assert [hit.id for hit in selection.my_contracts] == ["c-0", "c-1"]
    assert [hit.id for hit in selection.my_history] == ["h-1"]


def test_toggles_disable_categories() -> None:
    snapshot = _snapshot(my_history=[_hit("h")], my_contracts=[_hit("c")], my_playlist=[_hit("f")])
    config = CarryoverConfig(download_contract_history=False, download_my_contracts=False, download_favorites=True)

    selection = select_hits_for_download(snapshot, config)

    assert [hit.id for hit in selection.ordered()] == ["f"]


@pytest.mark.asyncio
async def test_failed_download_does_not_stop_others(caplog: pytest.LogCaptureFixture) -> None:
    contracts = _FakeContracts(known={"known"}, failing={"212345678902"})
    hits = [
        _hit("a", "212345678901"),
        _hit("b", "212345678902"),
        _hit("known", "212345678903"),
        _hit("bad", "abc"),
        _hit("none"),
        _hit("c", "312345678904"),
    ]

    report = await download_contracts(hits, contracts, "player-1", GameVersion.H3)

    assert contracts.downloaded == ["212345678901", "312345678904"]
    assert report.downloaded == ["212345678901", "312345678904"]
    assert report.failed == ["212345678902"]
    assert report.skipped_known == ["known"]
    assert report.skipped_invalid == ["abc", "None"]
    assert "Error downloading contract 212345678902" in caplog.text


@pytest.mark.asyncio
async def test_apply_records_played_and_favorite_contracts() -> None:
    user: dict[str, Any] = {"Extensions": {"PeacockFavoriteContracts": ["fav"], "PeacockPlayedContracts": {}}}
    snapshot = _snapshot(
        my_history=[_hit("h", "112345678901", LastPlayedAt="1970-01-01T00:00:02Z", Completed=True)],
        my_contracts=[_hit("mine", "212345678901")],
        my_playlist=[_hit("fav", "312345678901")],
    )
    contracts = _FakeContracts()

    report = await apply_contract_downloads(user, snapshot, CarryoverConfig(), contracts, "player-1", GameVersion.H3)

    assert report.downloaded == ["212345678901", "312345678901", "112345678901"]
    assert user["Extensions"]["PeacockFavoriteContracts"] == ["fav", "mine"]
    assert user["Extensions"]["PeacockPlayedContracts"] == {
        "h": {"LastPlayedAt": 2000, "Completed": True, "IsEscalation": False}
    }


@pytest.mark.asyncio
async def test_history_disabled_skips_played_contracts() -> None:
    user: dict[str, Any] = {"Extensions": {}}
    snapshot = _snapshot(my_history=[_hit("h", "112345678901")])

    report = await apply_contract_downloads(
        user,
        snapshot,
        CarryoverConfig(download_contract_history=False),
        _FakeContracts(),
        "player-1",
        GameVersion.H3,
    )

    assert report.downloaded == []
    assert "PeacockPlayedContracts" not in user["Extensions"]
