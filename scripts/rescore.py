from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from domain.entries import RawEntryError
from services.repository import Repository
from services.scouting import ScoutingService
from services.store import MatchStore


def read_entries(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise SystemExit(f"{path} must hold a raw entry or a list of raw entries")
    return [e for e in data if isinstance(e, dict)]


def stored_entries(store: MatchStore) -> List[Dict[str, Any]]:
    return [doc["raw"] for doc in store.all() if isinstance(doc.get("raw"), dict)]


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Re-aggregate and re-score raw scouting entries.")
    parser.add_argument("--season", type=str, default=None, help="season id (default: settings.activeSeason)")
    parser.add_argument("--entries", type=str, default=None, help="JSON file with raw entries (default: the match store)")
    parser.add_argument("--data-dir", type=str, default=None)
    parser.add_argument("--strict", action="store_true", help="reject malformed entries instead of skipping bad parts")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    repo = Repository(Path(args.data_dir) if args.data_dir else None)
    settings = repo.load_settings()
    settings.strictEntries = settings.strictEntries or args.strict
    schema = repo.load_season(args.season or settings.activeSeason)

    if args.entries:
        raws = read_entries(Path(args.entries))
    else:
        raws = stored_entries(MatchStore(repo.data_dir / "matches" / settings.storeFile))

    service = ScoutingService(schema, settings=settings, log_telemetry=False)
    failed = 0
    for raw in raws:
        try:
            scored = service.evaluate(raw)
        except RawEntryError as e:
            failed += 1
            print(f"REJECTED {raw.get('eventKey', '?')}: {e}")
            continue
        p = scored.points
        print(f"{scored.key}\tauto={p.auto}\tteleop={p.teleop}\tendgame={p.endgame}\ttotal={p.total}")
    print(f"Rescored {len(raws) - failed} of {len(raws)} entries under {schema.season}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
