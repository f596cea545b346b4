"""Client configuration for pycarryover."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycarryover._constants import REMOTE_HOST_SUFFIX, USER_AGENT, GameVersion
from pycarryover.exceptions import CarryoverConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class CarryoverConfig:
    """Carryover configuration.

    Parameters
    ----------
    game_version : GameVersion
        Game version whose official backend and default profile are used.
    download_contract_history : bool
        Download contracts from the player's recently played list and
        record them as played contracts.
    download_contract_history_limit : int
        Maximum number of the player's own contracts considered for
        download.  ``0`` means no limit.
    download_my_contracts : bool
        Download contracts authored by the player.
    download_favorites : bool
        Download contracts the player marked as favourites.
    remote_host_suffix : str
        Domain appended to the remote service name when building URLs.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    user_agent : str
        User agent sent to the official backend.
    """

    game_version: GameVersion = GameVersion.H3
    download_contract_history: bool = True
    download_contract_history_limit: int = 0
    download_my_contracts: bool = True
    download_favorites: bool = True
    remote_host_suffix: str = REMOTE_HOST_SUFFIX
    request_timeout: float = 30.0
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        object.__setattr__(self, "game_version", GameVersion.parse(self.game_version))
        if self.download_contract_history_limit < 0:
            raise CarryoverConfigError(
                f"download_contract_history_limit must be >= 0, got {self.download_contract_history_limit}"
            )
        if not self.request_timeout > 0:
            raise CarryoverConfigError(f"request_timeout must be > 0, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> CarryoverConfig:
        """Create configuration from environment variables.

        Reads optional ``CARRYOVER_*`` variables.  Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CarryoverConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        version_env = env.get("CARRYOVER_GAME_VERSION")
        if version_env is not None and "game_version" not in overrides:
            config_kwargs["game_version"] = GameVersion.parse(version_env)

        _ENV_BOOL_MAP = {
            "CARRYOVER_DOWNLOAD_CONTRACT_HISTORY": "download_contract_history",
            "CARRYOVER_DOWNLOAD_MY_CONTRACTS": "download_my_contracts",
            "CARRYOVER_DOWNLOAD_FAVORITES": "download_favorites",
        }
        for env_key, field_name in _ENV_BOOL_MAP.items():
            if field_name not in overrides:
                config_kwargs[field_name] = _env_bool(env.get(env_key), True)

        limit_env = env.get("CARRYOVER_DOWNLOAD_CONTRACT_HISTORY_LIMIT")
        if limit_env is not None and "download_contract_history_limit" not in overrides:
            try:
                config_kwargs["download_contract_history_limit"] = int(limit_env)
            except ValueError as exc:
                raise CarryoverConfigError(
                    f"CARRYOVER_DOWNLOAD_CONTRACT_HISTORY_LIMIT is not an integer: {limit_env!r}"
                ) from exc

        host_env = env.get("CARRYOVER_REMOTE_HOST_SUFFIX")
        if host_env is not None:
            config_kwargs["remote_host_suffix"] = host_env

        timeout_env = env.get("CARRYOVER_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise CarryoverConfigError(
                    f"CARRYOVER_REQUEST_TIMEOUT is not a number: {timeout_env!r}"
                ) from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
