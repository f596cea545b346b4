from __future__ import annotations

import pytest

from pycarryover._constants import GameVersion, remote_service_for
from pycarryover.config import CarryoverConfig
from pycarryover.exceptions import CarryoverConfigError

_ENV_KEYS = (
    "CARRYOVER_GAME_VERSION",
    "CARRYOVER_DOWNLOAD_CONTRACT_HISTORY",
    "CARRYOVER_DOWNLOAD_CONTRACT_HISTORY_LIMIT",
    "CARRYOVER_DOWNLOAD_MY_CONTRACTS",
    "CARRYOVER_DOWNLOAD_FAVORITES",
    "CARRYOVER_REMOTE_HOST_SUFFIX",
    "CARRYOVER_REQUEST_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = CarryoverConfig.from_env()
    assert config.game_version is GameVersion.H3
    assert config.download_contract_history is True
    assert config.download_contract_history_limit == 0
    assert config.download_my_contracts is True
    assert config.download_favorites is True
    assert config.remote_host_suffix == "hitman.io"


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARRYOVER_GAME_VERSION", "H2")
    monkeypatch.setenv("CARRYOVER_DOWNLOAD_CONTRACT_HISTORY", "off")
    monkeypatch.setenv("CARRYOVER_DOWNLOAD_CONTRACT_HISTORY_LIMIT", "5")
    monkeypatch.setenv("CARRYOVER_DOWNLOAD_FAVORITES", "0")
    monkeypatch.setenv("CARRYOVER_REQUEST_TIMEOUT", "2.5")

    config = CarryoverConfig.from_env()

    assert config.game_version is GameVersion.H2
    assert config.download_contract_history is False
    assert config.download_contract_history_limit == 5
    assert config.download_my_contracts is True
    assert config.download_favorites is False
    assert config.request_timeout == 2.5


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARRYOVER_GAME_VERSION", "h1")
    monkeypatch.setenv("CARRYOVER_DOWNLOAD_MY_CONTRACTS", "false")

    config = CarryoverConfig.from_env(game_version="scpc", download_my_contracts=True)

    assert config.game_version is GameVersion.SCPC
    assert config.download_my_contracts is True


def test_non_integer_limit_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARRYOVER_DOWNLOAD_CONTRACT_HISTORY_LIMIT", "ten")
    with pytest.raises(CarryoverConfigError):
        CarryoverConfig.from_env()


def test_negative_limit_is_rejected() -> None:
    with pytest.raises(CarryoverConfigError):
        CarryoverConfig(download_contract_history_limit=-1)


def test_unknown_game_version_is_rejected() -> None:
    with pytest.raises(CarryoverConfigError, match="h4"):
        CarryoverConfig(game_version="h4")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("version", "service"),
    [
        ("h1", "pc-service"),
        ("h2", "pc2-service"),
        ("h3", "hm3-service"),
        ("scpc", "hm3-service"),
    ],
)
def test_remote_service_for_version(version: str, service: str) -> None:
    assert remote_service_for(version) == service


def test_non_numeric_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARRYOVER_REQUEST_TIMEOUT", "soon")
    with pytest.raises(CarryoverConfigError, match="CARRYOVER_REQUEST_TIMEOUT"):
        CarryoverConfig.from_env()


@pytest.mark.parametrize("timeout", [0.0, -1.0])
def test_non_positive_timeout_is_rejected(timeout: float) -> None:
    with pytest.raises(CarryoverConfigError, match="request_timeout"):
        CarryoverConfig(request_timeout=timeout)
