#!/usr/bin/env python3
"""Dump every official payload a carryover would fetch.

This script calls the same endpoints as a real carryover and prints the
raw JSON of each, without loading or writing any local profile.  Useful
to capture fixtures and to check what the official backend returns for
an account.

Usage
-----
Set environment variables and run::

    export CARRYOVER_ACCESS_TOKEN="<bearer token from the game>"
    python scripts/dump_snapshot.py --game-version h3

Options::

    --game-version h3    Official backend to query (h1, h2, h3, scpc)
    --locations FILE     JSON mission-location registry (default: built-in)
    --output FILE        Write output to FILE instead of stdout
    --verbose            Log every request
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

import aiohttp

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pycarryover import CarryoverConfig, GameVersion, OfficialServerTransport, OfficialSession  # noqa: E402
from pycarryover.carryover import gather_official_responses  # noqa: E402
from pycarryover.locations import DEFAULT_MISSION_LOCATIONS, load_mission_locations  # noqa: E402
from pycarryover.models import RemoteProfileSnapshot  # noqa: E402


def _snapshot_to_json(snapshot: RemoteProfileSnapshot) -> dict[str, Any]:
    """Raw payloads only; parsed fields are derivable from them."""
    return {
        "GetProfile": snapshot.profile.raw,
        "PlayerProfile": snapshot.player_profile.raw,
        "Challenges": {key: challenge.raw for key, challenge in snapshot.challenges.items()},
        "ContractAttack": [hit.raw for hit in snapshot.contract_attack],
        "Arcade": [hit.raw for hit in snapshot.arcade],
        "MyHistory": [hit.raw for hit in snapshot.my_history],
        "MyContracts": [hit.raw for hit in snapshot.my_contracts],
        "MyPlaylist": [hit.raw for hit in snapshot.my_playlist],
        "CPD": {key: payload.raw if payload is not None else None for key, payload in snapshot.cpd.items()},
    }


async def _run(args: argparse.Namespace) -> int:
    token = os.environ.get("CARRYOVER_ACCESS_TOKEN")
    if not token:
        print("CARRYOVER_ACCESS_TOKEN is not set", file=sys.stderr)
        return 2

    config = CarryoverConfig.from_env(game_version=GameVersion.parse(args.game_version))
    locations = load_mission_locations(args.locations) if args.locations else DEFAULT_MISSION_LOCATIONS
    session = OfficialSession(player_id="dump", access_token=token)

    async with aiohttp.ClientSession() as http:
        transport = OfficialServerTransport(config, session, http)
        snapshot = await gather_official_responses(config, transport, config.game_version, locations)

    text = json.dumps(_snapshot_to_json(snapshot), indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Wrote {len(snapshot.challenges)} challenges to {args.output}", file=sys.stderr)
    else:
        print(text)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--game-version", default="h3")
    parser.add_argument("--locations", default=None)
    parser.add_argument("--output", default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
