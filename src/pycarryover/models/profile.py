"""GetProfile response models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pycarryover.models._base import OfficialBaseModel


class GamePersistentData(OfficialBaseModel):
    """``Extensions.gamepersistentdata`` of the official profile."""

    persistent_bool: dict[str, Any] = Field(default_factory=dict)

    def is_flag_set(self, key: str) -> bool:
        """Whether ``PersistentBool[key]`` is exactly ``True``."""
        return self.persistent_bool.get(key) is True


class ProfileExtensions(OfficialBaseModel):
    """``Extensions`` block requested with the six profile extensions."""

    progression: dict[str, Any] = Field(default_factory=dict, alias="progression")
    gamepersistentdata: GamePersistentData = Field(default_factory=GamePersistentData, alias="gamepersistentdata")
    opportunityprogression: dict[str, Any] = Field(default_factory=dict, alias="opportunityprogression")
    achievements: Any = Field(default=None, alias="achievements")
    friends: Any = Field(default=None, alias="friends")
    gameclient: Any = Field(default=None, alias="gameclient")

    def unlocked_opportunities(self) -> dict[str, bool]:
        """Map each opportunity id to whether it is unlocked.

        The backend stores a non-empty string for unlocked opportunities
        and ``""`` otherwise.
        """
        return {key: value is not None and value != "" for key, value in self.opportunityprogression.items()}


class OfficialProfile(OfficialBaseModel):
    """Decoded body of ``ProfileService/GetProfile``.

    Account identity fields are copied verbatim from ``raw``; only the
    fields the merge computes on are parsed here.
    """

    id: str
    gamertag: str = ""
    extensions: ProfileExtensions = Field(default_factory=ProfileExtensions)
