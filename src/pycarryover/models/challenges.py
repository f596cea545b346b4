"""Challenge progress models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

from pycarryover._constants import DEFAULT_CHALLENGE_STATE
from pycarryover.models._base import OfficialBaseModel


class ChallengeProgressEntry(BaseModel):
    """One entry of the local ``ChallengeProgression`` map.

    Parameters
    ----------
    ticked : bool
        Whether the completion has been acknowledged in the menus.
    completed : bool
        Whether the challenge is completed.
    current_state : str
        Current state-machine state.
    state : Any
        Opaque state-machine context blob.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_pascal)

    ticked: bool = False
    completed: bool = False
    current_state: str = DEFAULT_CHALLENGE_STATE
    state: Any = None

    def to_profile_entry(self) -> dict[str, Any]:
        """Serialise with the local profile's PascalCase keys."""
        return self.model_dump(by_alias=True)


class ChallengeInfo(OfficialBaseModel):
    id: str


class ChallengeProgression(OfficialBaseModel):
    challenge_id: str
    completed: bool = False
    completed_at: Any = None
    state: Any = None

    @property
    def is_completed(self) -> bool:
        """Completed flag, falling back to the completion timestamp.

        The backend sometimes reports ``Completed=false`` for challenges
        that carry a ``CompletedAt`` timestamp; the timestamp wins.
        """
        return self.completed or self.completed_at is not None


class RemoteChallenge(OfficialBaseModel):
    """One item of ``GetActiveChallengesAndProgression``."""

    challenge: ChallengeInfo
    progression: ChallengeProgression

    def to_progress_entry(self) -> ChallengeProgressEntry:
        completed = self.progression.is_completed
        state = self.progression.state
        current_state = state.get("CurrentState") if isinstance(state, dict) else None
        return ChallengeProgressEntry(
            ticked=completed,
            completed=completed,
            current_state=current_state if current_state is not None else DEFAULT_CHALLENGE_STATE,
            state=state,
        )
