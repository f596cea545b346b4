"""PlayerProfile page models."""

from __future__ import annotations

from pydantic import Field

from pycarryover.models._base import OfficialBaseModel


class CompletionData(OfficialBaseModel):
    """Per-sublocation XP and level."""

    id: str
    sub_location_id: str = ""
    level: int = 1
    max_level: int | None = None
    xp: int = Field(default=0, alias="XP")


class SubLocationData(OfficialBaseModel):
    completion_data: CompletionData


class SeasonLocation(OfficialBaseModel):
    location_id: str
    xp: int = 0
    action_xp: int = 0


class Season(OfficialBaseModel):
    number: int = 0
    locations: list[SeasonLocation] = Field(default_factory=list)


class PlayerProfileXp(OfficialBaseModel):
    """Aggregate player XP with the per-season location breakdown."""

    total: int = 0
    level: int = 1
    seasons: list[Season] = Field(default_factory=list)


class PlayerProfilePage(OfficialBaseModel):
    """``data`` of the ``profiles/page/PlayerProfile`` response."""

    sub_location_data: list[SubLocationData] = Field(default_factory=list)
    player_profile_xp: PlayerProfileXp = Field(default_factory=PlayerProfileXp)
