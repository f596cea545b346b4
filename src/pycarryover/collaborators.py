"""Interfaces of the services a carryover run depends on.

The local replacement server owns these; pycarryover only calls them.
They are structural protocols so tests (and embedding servers) can pass
any object with the right methods.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypedDict

from pycarryover._constants import GameVersion


class VersionedConfigStore(Protocol):
    """Source of versioned default records (e.g. the default user profile)."""

    def get_default(self, kind: str, game_version: GameVersion) -> dict[str, Any]:
        """Return a fresh, mutable copy of the default record *kind*."""
        ...


class ContractService(Protocol):
    """Local contract lookup and official contract download."""

    def resolve(self, contract_id: str) -> bool:
        """Whether *contract_id* is already known locally."""
        ...

    async def download(self, player_id: str, public_id: str, game_version: GameVersion) -> Any:
        """Download the contract with *public_id* from the official backend."""
        ...


class ChallengeRegistry(Protocol):
    def get_challenge_by_id(self, challenge_id: str, game_version: GameVersion) -> Mapping[str, Any] | None:
        """Return the challenge definition record, with a ``Definition`` key."""
        ...


class EvaluationOptions(TypedDict):
    timestamp: float | None
    eventName: str
    currentState: str
    timers: list[Any]


class EvaluationResult(TypedDict):
    state: str
    context: Any


class StateMachineEvaluator(Protocol):
    """Evaluates one event against a challenge state machine."""

    def handle_event(
        self,
        definition: Mapping[str, Any],
        context: Any,
        event: Mapping[str, Any],
        options: EvaluationOptions,
    ) -> EvaluationResult:
        ...
