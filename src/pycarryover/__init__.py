"""pycarryover - Async carryover of official game progression into a local profile."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycarryover")
except PackageNotFoundError:
    __version__ = "0+local"
from pycarryover._constants import GameVersion
from pycarryover._transport import OfficialServerTransport, ServiceResponse, Transport
from pycarryover.carryover import CarryoverResult, CarryoverService, carry_over_user_data, gather_official_responses
from pycarryover.collaborators import ChallengeRegistry, ContractService, StateMachineEvaluator, VersionedConfigStore
from pycarryover.config import CarryoverConfig
from pycarryover.downloads import DownloadReport
from pycarryover.exceptions import (
    CarryoverConfigError,
    CarryoverError,
    CarryoverFetchError,
    CarryoverSessionNotFoundError,
    CarryoverTransportError,
    ContractDownloadError,
)
from pycarryover.merge import LocationShape
from pycarryover.models import (
    ChallengeProgressEntry,
    Hit,
    OfficialProfile,
    PlayerProfilePage,
    RemoteChallenge,
    RemoteProfileSnapshot,
)
from pycarryover.session import InMemorySessionStore, OfficialSession, SessionProvider

__all__ = [
    "__version__",
    "CarryoverConfig",
    "CarryoverConfigError",
    "CarryoverError",
    "CarryoverFetchError",
    "CarryoverResult",
    "CarryoverService",
    "CarryoverSessionNotFoundError",
    "CarryoverTransportError",
    "ChallengeProgressEntry",
    "ChallengeRegistry",
    "ContractDownloadError",
    "ContractService",
    "DownloadReport",
    "GameVersion",
    "Hit",
    "InMemorySessionStore",
    "LocationShape",
    "OfficialProfile",
    "OfficialServerTransport",
    "OfficialSession",
    "PlayerProfilePage",
    "RemoteChallenge",
    "RemoteProfileSnapshot",
    "ServiceResponse",
    "SessionProvider",
    "StateMachineEvaluator",
    "Transport",
    "VersionedConfigStore",
    "carry_over_user_data",
    "gather_official_responses",
]
