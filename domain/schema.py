"""
Scoring Schema: the immutable "what counts and for how much" table for one season.

Built once from a season config (see data/seasons/*.json) and validated on
construction; both engines receive it as a plain value, so several seasons can
live side by side in one process.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from .models import (
    ActionDef, Phase, SCORED_PHASES, SeasonConfig, START_POSITION_FIELD, ToggleDef,
)

logger = logging.getLogger(__name__)

COUNTER_SUFFIX = "Count"


class SchemaConfigError(ValueError):
    """Raised when a season config cannot produce a valid schema."""


def counter_key(action_key: str) -> str:
    """Canonical counter field for an action key (``shoot`` -> ``shootCount``)."""
    return f"{action_key}{COUNTER_SUFFIX}"


@dataclass(frozen=True)
class ScoringSchema:
    season: str
    name: str
    version: str
    actions: Tuple[ActionDef, ...]
    toggles: Tuple[ToggleDef, ...]

    def __post_init__(self) -> None:
        _check(self.actions, self.toggles)
        # Lookup tables; object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "_actions_by_key", {a.key: a for a in self.actions})
        object.__setattr__(self, "_toggles_by_key", {t.key: t for t in self.toggles})

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "ScoringSchema":
        try:
            cfg = SeasonConfig.model_validate(data)
        except ValidationError as e:
            raise SchemaConfigError(f"Season config validation failed: {e}")
        schema = cls(
            season=cfg.season,
            name=cfg.name or cfg.season,
            version=cfg.version,
            actions=tuple(a.model_copy() for a in cfg.actions),
            toggles=tuple(t.model_copy() for t in cfg.toggles),
        )
        logger.info(
            "Loaded scoring schema %s v%s (%d actions, %d toggles)",
            schema.season, schema.version, len(schema.actions), len(schema.toggles),
        )
        return schema

    # --- actions ---------------------------------------------------------

    def list_action_keys(self) -> Tuple[str, ...]:
        return tuple(a.key for a in self.actions)

    def action_points(self, key: str, phase: Phase | str) -> int:
        """Points per unit of ``key`` in ``phase``; 0 where the phase is not scored.

        Raises KeyError for keys the schema does not declare.
        """
        action = self._actions_by_key[key]
        phase = Phase(phase)
        if phase == Phase.AUTO:
            return action.auto
        if phase == Phase.TELEOP:
            return action.teleop
        return 0

    def counter_key(self, key: str) -> str:
        return counter_key(key)

    def counter_keys(self) -> Tuple[str, ...]:
        return tuple(counter_key(a.key) for a in self.actions)

    # --- toggles ---------------------------------------------------------

    def list_toggle_keys(self, phase: Phase | str) -> Tuple[str, ...]:
        phase = Phase(phase)
        return tuple(t.key for t in self.toggles if t.phase == phase)

    def toggle_points(self, key: str) -> int:
        toggle = self._toggles_by_key.get(key)
        return toggle.points if toggle else 0

    def toggle_phase(self, key: str) -> Optional[Phase]:
        toggle = self._toggles_by_key.get(key)
        return toggle.phase if toggle else None

    def toggle_group(self, key: str) -> Optional[str]:
        toggle = self._toggles_by_key.get(key)
        return toggle.group if toggle else None

    def exclusion_groups(self, phase: Phase | str) -> Dict[str, Tuple[str, ...]]:
        """Mutual-exclusion groups of a phase, group -> member toggle keys."""
        phase = Phase(phase)
        groups: Dict[str, list] = {}
        for t in self.toggles:
            if t.phase == phase and t.group:
                groups.setdefault(t.group, []).append(t.key)
        return {g: tuple(keys) for g, keys in groups.items()}


def _check(actions: Tuple[ActionDef, ...], toggles: Tuple[ToggleDef, ...]) -> None:
    problems = []

    seen_actions = set()
    for a in actions:
        if a.key in seen_actions:
            problems.append(f"duplicate action key '{a.key}'")
        seen_actions.add(a.key)
        if a.auto < 0 or a.teleop < 0:
            problems.append(f"action '{a.key}' has a negative point value")

    seen_toggles = set()
    reserved = {p: {START_POSITION_FIELD} if p == Phase.AUTO else set() for p in Phase}
    for p in SCORED_PHASES:
        reserved[p] |= {counter_key(a.key) for a in actions}
    for t in toggles:
        if t.key in seen_toggles:
            problems.append(f"duplicate toggle key '{t.key}'")
        seen_toggles.add(t.key)
        if t.points < 0:
            problems.append(f"toggle '{t.key}' has a negative point value")
        if t.key in reserved[t.phase]:
            problems.append(f"toggle '{t.key}' collides with a {t.phase.value} counter field")

    if problems:
        raise SchemaConfigError("Invalid scoring schema: " + "; ".join(problems))
