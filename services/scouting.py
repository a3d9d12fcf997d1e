"""
Scouting service: raw entry -> canonical record + points -> store.

Wires the pure domain engines to the file-backed collaborators (telemetry
log and match store). The service holds no match state of its own.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from domain.aggregation import Aggregator
from domain.entries import parse_raw_entry
from domain.models import ScoredEntry
from domain.policies import EngineSettings
from domain.schema import ScoringSchema
from domain.scoring import Scorer
from domain.validators import find_exclusivity_violations
from services import telemetry
from services.store import MatchStore, match_key

logger = logging.getLogger(__name__)


class ScoutingService:
    def __init__(
        self,
        schema: ScoringSchema,
        store: Optional[MatchStore] = None,
        settings: Optional[EngineSettings] = None,
        log_telemetry: bool = True,
    ) -> None:
        self.schema = schema
        self.store = store
        self.settings = settings or EngineSettings()
        self.log_telemetry = log_telemetry
        self.aggregator = Aggregator(schema)
        self.scorer = Scorer(schema)

    def evaluate(self, raw: Mapping[str, Any]) -> ScoredEntry:
        """Aggregate and score without side effects.

        Raises RawEntryError only when settings.strictEntries is on.
        """
        entry = parse_raw_entry(raw, strict=self.settings.strictEntries)
        record = self.aggregator.aggregate(entry)
        points = self.scorer.score(record)
        warnings = list(entry.problems)
        if self.settings.reportExclusivity:
            warnings.extend(str(v) for v in find_exclusivity_violations(record, self.schema))
        for w in warnings:
            logger.warning("Entry %s: %s", match_key(raw), w)
        return ScoredEntry(
            key=match_key(raw),
            season=self.schema.season,
            record=record,
            points=points,
            shape=entry.shape,
            warnings=warnings,
        )

    def submit(self, raw: Mapping[str, Any], note: Optional[str] = None) -> ScoredEntry:
        """Evaluate, log and store one entry."""
        scored = self.evaluate(raw)
        if self.log_telemetry:
            telemetry.log_event("scored", raw, scored.season, scored.points, scored.warnings, note)
        if self.store is not None:
            self.store.put(to_document(scored, raw))
        logger.info(
            "Scored %s under %s: %d points (%s)",
            scored.key, scored.season, scored.points.total, scored.shape.value,
        )
        return scored

    def rescore(self, raws: Iterable[Mapping[str, Any]]) -> List[ScoredEntry]:
        """Re-run entries under this service's schema, e.g. after a season swap."""
        results = []
        for raw in raws:
            scored = self.evaluate(raw)
            if self.log_telemetry:
                telemetry.log_event("rescored", raw, scored.season, scored.points, scored.warnings)
            results.append(scored)
        return results


def to_document(scored: ScoredEntry, raw: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "key": scored.key,
        "season": scored.season,
        "shape": scored.shape.value,
        "raw": dict(raw),
        "record": scored.record,
        "points": scored.points.as_dict(),
        "warnings": scored.warnings,
    }
