"""
Match store: a small key-value store for scored scouting entries.

Documents are kept in one JSON object file keyed by match key; ``put``
replaces any previous document with the same key.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from services.telemetry import make_entry_id

DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "matches"


def match_key(raw: Mapping[str, Any]) -> str:
    """``<eventKey>_<matchNumber>_<teamNumber>`` when all are present, else a fingerprint."""
    parts = [raw.get("eventKey"), raw.get("matchNumber"), raw.get("teamNumber")]
    if all(p not in (None, "") for p in parts):
        return "_".join(str(p) for p in parts)
    return make_entry_id(raw)


class MatchStore:
    def __init__(self, path: Path | None = None) -> None:
        self.path = path or DATA_DIR / "matches.json"

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, docs: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(docs, f, indent=2, ensure_ascii=False)
        tmp.replace(self.path)

    def put(self, record: Dict[str, Any]) -> str:
        """Store ``record`` under its ``key`` field and return the key."""
        key = record["key"]
        docs = self._read()
        docs[key] = record
        self._write(docs)
        return key

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        return self._read().get(key)

    def all(self) -> List[Dict[str, Any]]:
        return list(self._read().values())
