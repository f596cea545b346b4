"""HitsCategory page models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pycarryover.models._base import OfficialBaseModel, parse_iso_timestamp_ms


class UserCentricData(OfficialBaseModel):
    """Player-specific state of a contract (``UserCentricContract.Data``)."""

    escalation_completed_levels: int = 0
    escalation_total_levels: int = 0
    escalation_completed: bool = False
    last_played_at: str | None = None
    completed: bool = False

    @property
    def last_played_at_ms(self) -> int | None:
        return parse_iso_timestamp_ms(self.last_played_at)


class UserCentricContract(OfficialBaseModel):
    data: UserCentricData = Field(default_factory=UserCentricData)
    contract: dict[str, Any] = Field(default_factory=dict)

    @property
    def public_id(self) -> str | None:
        metadata = self.contract.get("Metadata")
        if not isinstance(metadata, dict):
            return None
        value = metadata.get("PublicId")
        return str(value) if value is not None else None


class Hit(OfficialBaseModel):
    id: str
    user_centric_contract: UserCentricContract = Field(default_factory=UserCentricContract)

    @property
    def escalation_level(self) -> int:
        """Level the player is on: completed levels plus one."""
        return self.user_centric_contract.data.escalation_completed_levels + 1


class HitsCategoryData(OfficialBaseModel):
    type: str = ""
    hits: list[Hit] = Field(default_factory=list)
    page: int = 0
    has_more: bool = False


class HitsCategoryPage(OfficialBaseModel):
    """``data`` of one ``profiles/page/HitsCategory`` response."""

    category: str = ""
    data: HitsCategoryData = Field(default_factory=HitsCategoryData)
