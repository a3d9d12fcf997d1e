"""
Raw entry boundary: normalize a loosely-shaped scouting entry before aggregation.

Recognized fields are checked piece by piece. In lenient mode (the default)
malformed pieces are dropped and described in ``problems``; in strict mode the
same problems raise RawEntryError. Unknown keys inside well-formed pieces are
kept here and ignored later by the aggregation engine, which knows the schema.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .models import (
    ACTION_FIELDS, ActionEvent, BULK_FIELDS, CONSUMED_FIELDS, EntryShape,
    RawMatchEntry, START_POSITION_FIELD, STATUS_FIELDS,
)


class RawEntryError(ValueError):
    """Raised in strict mode when a raw entry has malformed parts."""

    def __init__(self, problems: List[str]) -> None:
        super().__init__("Malformed raw entry: " + "; ".join(problems))
        self.problems = problems


def _is_int(value: Any) -> bool:
    # bool is a subclass of int; a count of True is not a count
    return isinstance(value, int) and not isinstance(value, bool)


def _start_position(raw: Any, problems: List[str]) -> List[bool]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        problems.append(f"{START_POSITION_FIELD} must be a list of booleans")
        return []
    if not all(isinstance(v, bool) for v in raw):
        problems.append(f"{START_POSITION_FIELD} must contain only booleans")
        return [v is True for v in raw]
    return list(raw)


def _events(field: str, raw: Any, problems: List[str]) -> List[ActionEvent]:
    if not isinstance(raw, (list, tuple)):
        problems.append(f"{field} must be a list of action events")
        return []
    events: List[ActionEvent] = []
    for i, item in enumerate(raw, start=1):
        if not isinstance(item, Mapping) or not isinstance(item.get("actionType"), str):
            problems.append(f"{field} #{i} must be an object with a string actionType")
            continue
        increment = item.get("increment", 1)
        if not _is_int(increment) or increment < 0:
            problems.append(f"{field} #{i} increment must be a non-negative integer")
            continue
        events.append(ActionEvent(actionType=item["actionType"], increment=increment))
    return events


def _counters(field: str, raw: Any, problems: List[str]) -> Dict[str, int]:
    if not isinstance(raw, Mapping):
        problems.append(f"{field} must be an object of counter values")
        return {}
    counters: Dict[str, int] = {}
    for key, value in raw.items():
        if not _is_int(value) or value < 0:
            problems.append(f"{field}.{key} must be a non-negative integer")
            continue
        counters[str(key)] = value
    return counters


def _flags(field: str, raw: Any, problems: List[str]) -> Dict[str, bool]:
    if not isinstance(raw, Mapping):
        problems.append(f"{field} must be an object of boolean flags")
        return {}
    flags: Dict[str, bool] = {}
    for key, value in raw.items():
        if not isinstance(value, bool):
            problems.append(f"{field}.{key} must be a boolean")
            continue
        flags[str(key)] = value
    return flags


def detect_shape(data: Mapping[str, Any]) -> EntryShape:
    has_events = any(data.get(f) is not None for f in ACTION_FIELDS.values())
    has_bulk = any(data.get(f) is not None for f in BULK_FIELDS.values())
    if has_events and has_bulk:
        return EntryShape.MIXED
    if has_events:
        return EntryShape.LEGACY
    if has_bulk:
        return EntryShape.BULK
    return EntryShape.EMPTY


def parse_raw_entry(data: Optional[Mapping[str, Any]], strict: bool = False) -> RawMatchEntry:
    """Normalize ``data`` into a RawMatchEntry.

    Never raises in lenient mode; a non-mapping input yields an empty entry.
    """
    problems: List[str] = []
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        problems.append("raw entry must be an object")
        data = {}

    entry = RawMatchEntry(
        shape=detect_shape(data),
        start_position=_start_position(data.get(START_POSITION_FIELD), problems),
    )
    for phase, field in ACTION_FIELDS.items():
        if data.get(field) is not None:
            entry.actions[phase] = _events(field, data[field], problems)
    for phase, field in BULK_FIELDS.items():
        if data.get(field) is not None:
            entry.bulk[phase] = _counters(field, data[field], problems)
    for phase, field in STATUS_FIELDS.items():
        if data.get(field) is not None:
            entry.status[phase] = _flags(field, data[field], problems)
    entry.extras = {k: v for k, v in data.items() if k not in CONSUMED_FIELDS}
    entry.problems = problems

    if strict and problems:
        raise RawEntryError(problems)
    return entry


def validate_raw_entry(data: Mapping[str, Any]) -> RawMatchEntry:
    """Strict boundary check; raises RawEntryError listing every problem."""
    return parse_raw_entry(data, strict=True)