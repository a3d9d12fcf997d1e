"""
Scoring Engine: canonical record -> point totals.

Phase-symmetric: a phase earns points from its action counters (auto and
teleop only) plus every toggle of that phase found True. Mutual-exclusion
groups are not consulted here, so two True toggles of one group both count;
see domain.validators.find_exclusivity_violations for the caller-side check.
"""
from __future__ import annotations

from typing import Any, Mapping

from .models import Phase, PointTotals, SCORED_PHASES
from .schema import ScoringSchema, counter_key


def _count(fields: Mapping[str, Any], key: str) -> int:
    value = fields.get(key, 0)
    # Absent, None or a stray boolean all count as the default
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


class Scorer:
    """Prices canonical records with one season's schema."""

    def __init__(self, schema: ScoringSchema) -> None:
        self.schema = schema

    def phase_points(self, record: Mapping[str, Any], phase: Phase) -> int:
        fields = record.get(phase.value) or {}
        points = 0
        if phase in SCORED_PHASES:
            for key in self.schema.list_action_keys():
                per_unit = self.schema.action_points(key, phase)
                if per_unit:
                    points += _count(fields, counter_key(key)) * per_unit
        for key in self.schema.list_toggle_keys(phase):
            if fields.get(key) is True:
                points += self.schema.toggle_points(key)
        return points

    def auto_points(self, record: Mapping[str, Any]) -> int:
        return self.phase_points(record, Phase.AUTO)

    def teleop_points(self, record: Mapping[str, Any]) -> int:
        return self.phase_points(record, Phase.TELEOP)

    def endgame_points(self, record: Mapping[str, Any]) -> int:
        return self.phase_points(record, Phase.ENDGAME)

    def total_points(self, record: Mapping[str, Any]) -> int:
        return self.auto_points(record) + self.teleop_points(record) + self.endgame_points(record)

    def score(self, record: Mapping[str, Any]) -> PointTotals:
        return PointTotals(
            auto=self.auto_points(record),
            teleop=self.teleop_points(record),
            endgame=self.endgame_points(record),
        )


def score(record: Mapping[str, Any], schema: ScoringSchema) -> PointTotals:
    return Scorer(schema).score(record)
