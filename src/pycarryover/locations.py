"""Mission location registry used to enumerate challenge requests.

The registry is a nested mapping whose leaves are lists of mission
(contract) ids, e.g. ``{"LOCATION_PARENT_PARIS": ["<id>", ...],
"escalations": {...}}``.  Only the collected ids matter; the nesting
is whatever the local server's registry uses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pycarryover.exceptions import CarryoverConfigError

_logger = logging.getLogger(__name__)

DEFAULT_MISSION_LOCATIONS: dict[str, Any] = {
    "LOCATION_PARENT_PARIS": ["00000000-0000-0000-0000-000000000200"],
    "LOCATION_PARENT_COASTALTOWN": ["00000000-0000-0000-0000-000000000600"],
    "LOCATION_PARENT_MARRAKECH": ["00000000-0000-0000-0000-000000000400"],
    "LOCATION_PARENT_BANGKOK": ["db341d9f-58a4-411d-be57-0bc4ed85646b"],
    "LOCATION_PARENT_COLORADO": ["42bac555-bbb9-429d-a8ce-f1ffdf94211c"],
    "LOCATION_PARENT_HOKKAIDO": ["0e81a82e-b409-41e9-9e3b-5f82e57f7a12"],
    "LOCATION_PARENT_NEWZEALAND": ["c65019e5-43a8-4a33-8a2a-84c750a5eeb3"],
    "LOCATION_PARENT_MIAMI": ["c1d015b4-be08-4e44-808e-ada0f387656f"],
    "LOCATION_PARENT_COLOMBIA": ["422519be-ed2e-44df-9dac-18f739d44fd9"],
    "LOCATION_PARENT_MUMBAI": ["0fad48d7-3d0f-4c66-8605-6cbe9c3a46d7"],
    "LOCATION_PARENT_NORTHAMERICA": ["82f55837-e26c-41bf-bc6e-fa97b7981fbc"],
    "LOCATION_PARENT_NORTHSEA": ["0d225edf-40cd-4f20-a30f-b62a373801d3"],
    "LOCATION_PARENT_GREEDY": ["7a03a97d-238c-48bd-bda0-e5f279569cce"],
    "LOCATION_PARENT_OPULENT": ["095261b5-e15b-4ca1-9bb7-001fb85c5aaa"],
    "LOCATION_PARENT_GOLDEN": ["7d85f2b0-80ca-49be-a2b7-d56f67faf252"],
    "LOCATION_PARENT_ANCESTRAL": ["755984a8-fb0b-4673-8637-95cfe7d34e0f"],
    "LOCATION_PARENT_EDGY": ["ebcd14b2-0786-4ceb-a2a4-e771f60d0125"],
    "LOCATION_PARENT_WET": ["3d0cbb8c-2a80-442a-896b-fea00e98768c"],
    "LOCATION_PARENT_ELEGANT": ["d42f850f-ca55-4fc9-9766-8c6a2a6b8e36"],
    "LOCATION_PARENT_TRAPPED": ["a3e19d55-64a6-4282-bb3c-d18c3f3e6e29"],
    "LOCATION_PARENT_ROCKY": ["b2aac100-dfc7-4f85-b9cd-528114436f6c"],
}


def _collect(value: Any, out: set[str]) -> None:
    if isinstance(value, Mapping):
        for child in value.values():
            _collect(child, out)
    elif isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, str):
                out.add(item)
            else:
                _collect(item, out)


def collect_location_ids(registry: Mapping[str, Any]) -> list[str]:
    """Collect every id listed anywhere in *registry*.

    Ids are de-duplicated and sorted so request order does not depend on
    the registry's iteration order.
    """
    found: set[str] = set()
    _collect(registry, found)
    return sorted(found)


def load_mission_locations(path: str | Path) -> dict[str, Any]:
    """Load a registry from a JSON file."""
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CarryoverConfigError(f"Cannot load mission locations from {file_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CarryoverConfigError(f"Mission locations in {file_path} must be a JSON object")
    _logger.debug("Loaded mission locations from %s", file_path)
    return data
