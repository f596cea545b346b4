"""Aggregate of every official payload fetched during one carryover."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pycarryover.models.challenges import RemoteChallenge
from pycarryover.models.cpd import ContractProgressionPayload
from pycarryover.models.hits import Hit
from pycarryover.models.player_profile import PlayerProfilePage
from pycarryover.models.profile import OfficialProfile


class RemoteProfileSnapshot(BaseModel):
    """Everything fetched from the official backend for one run.

    Parameters
    ----------
    profile : OfficialProfile
        GetProfile body.
    player_profile : PlayerProfilePage
        PlayerProfile page data.
    challenges : dict[str, RemoteChallenge]
        Challenge progress keyed by challenge id.  When a challenge is
        returned for several locations the last response wins.
    contract_attack, arcade, my_history, my_contracts, my_playlist : list[Hit]
        All hits of each hit category, in page order.
    cpd : dict[str, ContractProgressionPayload | None]
        Contract progression data keyed by mission id; ``None`` when the
        probe failed.
    """

    model_config = ConfigDict(frozen=True)

    profile: OfficialProfile
    player_profile: PlayerProfilePage
    challenges: dict[str, RemoteChallenge] = Field(default_factory=dict)
    contract_attack: list[Hit] = Field(default_factory=list)
    arcade: list[Hit] = Field(default_factory=list)
    my_history: list[Hit] = Field(default_factory=list)
    my_contracts: list[Hit] = Field(default_factory=list)
    my_playlist: list[Hit] = Field(default_factory=list)
    cpd: dict[str, ContractProgressionPayload | None] = Field(default_factory=dict)

    @property
    def escalation_hits(self) -> list[Hit]:
        """Escalation and arcade hits, escalations first."""
        return [*self.contract_attack, *self.arcade]
