"""
Domain Models for the Match Scouting Score Engine

These are pure data models with no Streamlit dependencies.
They define the core domain language and data structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Phase(str, Enum):
    """Match phases, in match order"""
    AUTO = "auto"
    TELEOP = "teleop"
    ENDGAME = "endgame"


# Phases that carry action counters; endgame is toggle-only
SCORED_PHASES = (Phase.AUTO, Phase.TELEOP)


class EntryShape(str, Enum):
    """Which action input format a raw entry uses"""
    EMPTY = "empty"      # no action data at all
    LEGACY = "legacy"    # discrete action-event arrays only
    BULK = "bulk"        # bulk counter objects only
    MIXED = "mixed"      # both, e.g. during a format migration


# Raw entry field names, per phase
ACTION_FIELDS = {Phase.AUTO: "autoActions", Phase.TELEOP: "teleopActions"}
BULK_FIELDS = {Phase.AUTO: "autoData", Phase.TELEOP: "teleopData"}
STATUS_FIELDS = {
    Phase.AUTO: "autoRobotStatus",
    Phase.TELEOP: "teleopRobotStatus",
    Phase.ENDGAME: "endgameRobotStatus",
}
START_POSITION_FIELD = "startPosition"

CONSUMED_FIELDS = frozenset(
    [START_POSITION_FIELD]
    + list(ACTION_FIELDS.values())
    + list(BULK_FIELDS.values())
    + list(STATUS_FIELDS.values())
)


class ActionDef(BaseModel):
    """A repeatable scorable action, priced per phase"""
    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    label: Optional[str] = None
    auto: int = 0
    teleop: int = 0


class ToggleDef(BaseModel):
    """A one-time boolean status fact scoped to a single phase"""
    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    phase: Phase
    label: Optional[str] = None
    points: int = 0
    group: Optional[str] = None


class SeasonConfig(BaseModel):
    """Complete season schema file structure"""
    # Also used as the file name under data/seasons
    season: str = Field(pattern=r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
    name: Optional[str] = None
    version: str = "1.0.0"
    actions: List[ActionDef] = Field(default_factory=list)
    toggles: List[ToggleDef] = Field(default_factory=list)


class ActionEvent(BaseModel):
    """Legacy discrete action event"""
    actionType: str
    increment: int = 1


class RawMatchEntry(BaseModel):
    """Raw entry after boundary normalization.

    Only well-formed parts survive; anything malformed is listed in
    ``problems``. ``extras`` holds the pass-through fields in input order.
    """
    shape: EntryShape = EntryShape.EMPTY
    start_position: List[bool] = Field(default_factory=list)
    actions: Dict[Phase, List[ActionEvent]] = Field(default_factory=dict)
    bulk: Dict[Phase, Dict[str, int]] = Field(default_factory=dict)
    status: Dict[Phase, Dict[str, bool]] = Field(default_factory=dict)
    extras: Dict[str, Any] = Field(default_factory=dict)
    problems: List[str] = Field(default_factory=list)


@dataclass(frozen=True)
class PointTotals:
    """Point totals for one canonical record"""
    auto: int = 0
    teleop: int = 0
    endgame: int = 0

    @property
    def total(self) -> int:
        return self.auto + self.teleop + self.endgame

    def as_dict(self) -> Dict[str, int]:
        return {
            "autoPoints": self.auto,
            "teleopPoints": self.teleop,
            "endgamePoints": self.endgame,
            "totalPoints": self.total,
        }


@dataclass(frozen=True)
class ExclusivityViolation:
    """More than one toggle of a mutual-exclusion group is set"""
    phase: Phase
    group: str
    keys: Tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.phase.value}: group '{self.group}' has {len(self.keys)} toggles set ({', '.join(self.keys)})"


@dataclass
class ScoredEntry:
    """Result of running one raw entry through aggregation and scoring"""
    key: str
    season: str
    record: Dict[str, Any]
    points: PointTotals
    shape: EntryShape = EntryShape.EMPTY
    warnings: List[str] = field(default_factory=list)
