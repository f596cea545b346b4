"""Contract progression data (CPD) models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pycarryover.models._base import OfficialBaseModel


class ContractProgressionPayload(OfficialBaseModel):
    """Decoded body of ``ContractsService/GetForPlay2``."""

    contract_session_id: str | None = None
    contract_progression_data: dict[str, Any] | None = Field(default_factory=dict)
    """``null`` when the mission has no progression yet."""

    def to_profile_entry(self) -> dict[str, Any]:
        """Raw payload with the progression data keys flattened alongside it."""
        entry = dict(self.raw)
        entry.update(self.contract_progression_data or {})
        return entry
