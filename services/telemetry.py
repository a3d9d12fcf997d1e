"""
Telemetry service: logs scored entries to a JSONL file.
"""
from __future__ import annotations

import json
import hashlib
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from domain.models import PointTotals


LOG_DIR = Path(__file__).resolve().parent.parent / "data" / "logs"
LOG_FILE = LOG_DIR / "scored.jsonl"


def _ensure_dirs() -> None:
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)


def _serialize(obj: Any) -> Any:
    if obj is None:
        return None
    # Enums
    if hasattr(obj, "value") and not isinstance(obj, (str, bytes)):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [_serialize(x) for x in obj]
    if isinstance(obj, Mapping):
        return {str(k): _serialize(v) for k, v in obj.items()}
    return obj


def make_entry_id(raw: Mapping[str, Any]) -> str:
    """Deterministic fingerprint for a raw entry."""
    payload = json.dumps(_serialize(raw), sort_keys=True, ensure_ascii=False, default=str)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


def log_event(
    event: str,
    raw: Mapping[str, Any],
    season: str,
    points: PointTotals,
    warnings: Optional[List[str]] = None,
    note: Optional[str] = None,
) -> Dict[str, Any]:
    """Append a log entry to the JSONL file and return the record."""
    _ensure_dirs()
    now = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    rec: Dict[str, Any] = {
        "ts": now,
        "event": event,  # scored | rescored
        "entry_id": make_entry_id(raw),
        "season": season,
        "points": points.as_dict(),
        "warnings": list(warnings or []),
        "note": note,
    }
    with LOG_FILE.open("a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")
    return rec


def read_events(limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Most recent first; unreadable lines are skipped."""
    if not LOG_FILE.exists():
        return []
    rows: List[Dict[str, Any]] = []
    with LOG_FILE.open("r", encoding="utf-8") as f:
        for line in f:
            try:
                rows.append(json.loads(line))
            except ValueError:
                continue
    rows.reverse()
    return rows[:limit] if limit is not None else rows
