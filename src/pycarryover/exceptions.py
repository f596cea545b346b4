"""Custom exception hierarchy for pycarryover."""

from __future__ import annotations


class CarryoverError(Exception):
    """Base exception for all pycarryover errors."""


class CarryoverConfigError(CarryoverError):
    """Invalid or missing configuration."""


class CarryoverSessionNotFoundError(CarryoverError):
    """No authenticated official-server session exists for the player."""

    def __init__(self, player_id: str) -> None:
        self.player_id = player_id
        super().__init__(f"User not found: no official session for player {player_id}")


class CarryoverTransportError(CarryoverError):
    """HTTP-level failure (network, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class CarryoverFetchError(CarryoverTransportError):
    """A required official endpoint answered with a non-success status.

    Aborts the whole carryover.  ``endpoint`` names the failing request
    and, for per-location challenge requests, ``location_id`` names the
    location that failed.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
        location_id: str | None = None,
    ) -> None:
        self.location_id = location_id
        super().__init__(message, status_code=status_code, endpoint=endpoint)


class ContractDownloadError(CarryoverError):
    """A single contract could not be downloaded.

    Contract services raise this (or any other exception); the download
    trigger logs it and continues with the next contract.
    """

    def __init__(self, message: str, *, public_id: str = "") -> None:
        self.public_id = public_id
        super().__init__(message)
