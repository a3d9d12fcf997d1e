import pytest

from domain.aggregation import aggregate
from domain.models import Phase
from domain.validators import find_exclusivity_violations, validate_season_config
from services.repository import Repository


def test_no_violation_for_single_climb():
    schema = Repository().load_season("2026-rebuilt")
    rec = aggregate({"endgameRobotStatus": {"climbL2": True, "climbFailed": True}}, schema)
    assert find_exclusivity_violations(rec, schema) == []


def test_violation_reported_per_group():
    schema = Repository().load_season("2026-rebuilt")
    rec = aggregate({"endgameRobotStatus": {"climbL1": True, "climbL3": True}}, schema)
    violations = find_exclusivity_violations(rec, schema)
    assert len(violations) == 1
    v = violations[0]
    assert v.phase == Phase.ENDGAME
    assert v.group == "climb"
    assert v.keys == ("climbL1", "climbL3")
    assert "climbL1, climbL3" in str(v)


def test_validate_season_config_rejects_bad_files():
    with pytest.raises(ValueError):
        validate_season_config({"actions": []})
    with pytest.raises(ValueError, match="negative"):
        validate_season_config({"season": "x", "actions": [{"key": "a", "auto": -3}]})


def test_validate_season_config_returns_model():
    cfg = validate_season_config({"season": "x", "toggles": [{"key": "park", "phase": "endgame", "points": 2}]})
    assert cfg.season == "x"
    assert cfg.toggles[0].phase == Phase.ENDGAME
