"""
Validation helpers for season config files and canonical records.
"""
from typing import Any, Dict, List, Mapping

from pydantic import ValidationError
from .models import ExclusivityViolation, Phase, SeasonConfig
from .schema import ScoringSchema


def validate_season_config(data: Dict[str, Any]) -> SeasonConfig:
    """Validate dict against SeasonConfig and the schema rules; raises ValueError if invalid."""
    try:
        cfg = SeasonConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise with a cleaner message for UI consumption
        raise ValueError(f"Season config validation failed: {e}")
    ScoringSchema.from_config(data)
    return cfg


def find_exclusivity_violations(record: Mapping[str, Any], schema: ScoringSchema) -> List[ExclusivityViolation]:
    """Groups with more than one toggle set.

    Scoring still counts every True toggle; this only reports the problem.
    """
    violations: List[ExclusivityViolation] = []
    for phase in Phase:
        fields = record.get(phase.value) or {}
        for group, keys in schema.exclusion_groups(phase).items():
            on = tuple(k for k in keys if fields.get(k) is True)
            if len(on) > 1:
                violations.append(ExclusivityViolation(phase=phase, group=group, keys=on))
    return violations
