"""
Aggregation Engine: raw scouting entry -> schema-complete canonical record.

The record is built by an ordered pipeline of stages. Order matters for
entries that carry both input formats: bulk counters establish a value and
legacy events then add to it (bulk 4 + events 2 and 3 -> 9).

Output shape:
    {
        "auto":    {"startPosition": int | None, "<action>Count": int, "<toggle>": bool, ...},
        "teleop":  {"<action>Count": int, "<toggle>": bool, ...},
        "endgame": {"<toggle>": bool, ...},
        ...pass-through fields...
    }
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .entries import parse_raw_entry
from .models import Phase, RawMatchEntry, SCORED_PHASES, START_POSITION_FIELD
from .schema import ScoringSchema, counter_key

logger = logging.getLogger(__name__)

CanonicalRecord = Dict[str, Any]
Stage = Callable[[CanonicalRecord, RawMatchEntry, ScoringSchema], None]


def apply_defaults(record: CanonicalRecord, entry: RawMatchEntry, schema: ScoringSchema) -> None:
    """Every declared counter 0, every declared toggle False, all phases."""
    for phase in Phase:
        fields: Dict[str, Any] = {}
        if phase == Phase.AUTO:
            fields[START_POSITION_FIELD] = None
        if phase in SCORED_PHASES:
            for key in schema.list_action_keys():
                fields[counter_key(key)] = 0
        for key in schema.list_toggle_keys(phase):
            fields[key] = False
        record[phase.value] = fields


def resolve_start_position(flags: List[bool]) -> Optional[int]:
    """Index of the first selected position, or None when nothing is selected."""
    for i, selected in enumerate(flags):
        if selected is True:
            return i
    return None


def apply_start_position(record: CanonicalRecord, entry: RawMatchEntry, schema: ScoringSchema) -> None:
    record[Phase.AUTO.value][START_POSITION_FIELD] = resolve_start_position(entry.start_position)


def apply_bulk_counters(record: CanonicalRecord, entry: RawMatchEntry, schema: ScoringSchema) -> None:
    """Current format: counter values are copied verbatim over the defaults."""
    declared = set(schema.counter_keys())
    for phase, counters in entry.bulk.items():
        if phase not in SCORED_PHASES:
            logger.debug("Ignoring %s counters; the phase has none", phase.value)
            continue
        target = record[phase.value]
        for key, value in counters.items():
            if key not in declared:
                logger.debug("Ignoring unknown %s counter %r", phase.value, key)
                continue
            target[key] = value


def apply_legacy_events(record: CanonicalRecord, entry: RawMatchEntry, schema: ScoringSchema) -> None:
    """Legacy format: each event adds its increment to the action's counter."""
    declared = set(schema.list_action_keys())
    for phase, events in entry.actions.items():
        if phase not in SCORED_PHASES:
            logger.debug("Ignoring %s actions; the phase has no counters", phase.value)
            continue
        target = record[phase.value]
        for event in events:
            if event.actionType not in declared:
                logger.debug("Ignoring unknown %s action %r", phase.value, event.actionType)
                continue
            target[counter_key(event.actionType)] += event.increment


def apply_status_flags(record: CanonicalRecord, entry: RawMatchEntry, schema: ScoringSchema) -> None:
    """Overlay robot status flags; an explicit False is honored."""
    for phase, flags in entry.status.items():
        declared = set(schema.list_toggle_keys(phase))
        target = record[phase.value]
        for key, value in flags.items():
            if key not in declared:
                logger.debug("Ignoring unknown %s toggle %r", phase.value, key)
                continue
            target[key] = value


def apply_passthrough(record: CanonicalRecord, entry: RawMatchEntry, schema: ScoringSchema) -> None:
    """Copy unconsumed top-level fields; phase names are never overwritten."""
    phase_names = {p.value for p in Phase}
    for key, value in entry.extras.items():
        if key in phase_names:
            logger.debug("Dropping pass-through field %r; it would replace a phase record", key)
            continue
        record[key] = value


PIPELINE: Tuple[Stage, ...] = (
    apply_defaults,
    apply_start_position,
    apply_bulk_counters,
    apply_legacy_events,
    apply_status_flags,
    apply_passthrough,
)


class Aggregator:
    """Builds canonical records for one season's schema."""

    def __init__(self, schema: ScoringSchema, stages: Tuple[Stage, ...] = PIPELINE) -> None:
        self.schema = schema
        self.stages = stages

    def aggregate(self, raw: Union[Mapping[str, Any], RawMatchEntry, None]) -> CanonicalRecord:
        entry = raw if isinstance(raw, RawMatchEntry) else parse_raw_entry(raw)
        record: CanonicalRecord = {}
        for stage in self.stages:
            stage(record, entry, self.schema)
        return record


def aggregate(raw: Union[Mapping[str, Any], RawMatchEntry, None], schema: ScoringSchema) -> CanonicalRecord:
    return Aggregator(schema).aggregate(raw)


def default_record(schema: ScoringSchema) -> CanonicalRecord:
    """The all-defaults record, i.e. what an empty entry aggregates to."""
    return aggregate({}, schema)
