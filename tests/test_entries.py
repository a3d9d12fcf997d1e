import pytest

from domain.entries import RawEntryError, detect_shape, parse_raw_entry, validate_raw_entry
from domain.models import EntryShape, Phase


def test_shape_detection():
    assert detect_shape({}) == EntryShape.EMPTY
    assert detect_shape({"comments": "hi"}) == EntryShape.EMPTY
    assert detect_shape({"autoActions": []}) == EntryShape.LEGACY
    assert detect_shape({"teleopData": {"shootCount": 1}}) == EntryShape.BULK
    assert detect_shape({"autoActions": [], "teleopData": {}}) == EntryShape.MIXED


def test_parse_keeps_well_formed_parts():
    entry = parse_raw_entry({
        "startPosition": [False, True],
        "autoActions": [{"actionType": "shoot", "increment": 2}],
        "teleopData": {"shootCount": 3},
        "endgameRobotStatus": {"climbL2": True},
        "comments": "ok",
    })
    assert entry.shape == EntryShape.MIXED
    assert entry.start_position == [False, True]
    assert entry.actions[Phase.AUTO][0].actionType == "shoot"
    assert entry.actions[Phase.AUTO][0].increment == 2
    assert entry.bulk == {Phase.TELEOP: {"shootCount": 3}}
    assert entry.status == {Phase.ENDGAME: {"climbL2": True}}
    assert entry.extras == {"comments": "ok"}
    assert entry.problems == []


def test_lenient_parse_reports_problems():
    entry = parse_raw_entry({
        "autoActions": [{"increment": 1}],
        "autoData": {"shootCount": True},
        "teleopRobotStatus": "defended",
    })
    assert len(entry.problems) == 3
    assert entry.actions[Phase.AUTO] == []
    assert entry.bulk[Phase.AUTO] == {}
    assert entry.status[Phase.TELEOP] == {}


def test_strict_parse_raises_with_every_problem():
    with pytest.raises(RawEntryError) as exc:
        validate_raw_entry({"startPosition": [1, 0], "teleopActions": [{"actionType": "shoot", "increment": -2}]})
    assert len(exc.value.problems) == 2
    assert "startPosition" in str(exc.value)


def test_strict_parse_accepts_clean_entry():
    entry = validate_raw_entry({"autoData": {"shootCount": 4}, "matchNumber": 3})
    assert entry.shape == EntryShape.BULK
    assert entry.extras == {"matchNumber": 3}


def test_null_fields_are_absent():
    entry = parse_raw_entry({"autoActions": None, "autoRobotStatus": None, "startPosition": None})
    assert entry.shape == EntryShape.EMPTY
    assert entry.actions == {} and entry.status == {}
    assert entry.problems == []
