import json

import pytest

from domain.entries import RawEntryError
from domain.models import EntryShape, PointTotals
from domain.policies import EngineSettings
from services import telemetry
from services.repository import Repository, UnknownSeasonError
from services.scouting import ScoutingService
from services.store import MatchStore, match_key


RAW = {
    "eventKey": "2026txhou",
    "matchNumber": 14,
    "teamNumber": 118,
    "startPosition": [False, False, True],
    "autoData": {"fuelScoredCount": 6},
    "teleopData": {"fuelScoredCount": 21, "fuelPassedCount": 4},
    "autoRobotStatus": {"leftStartZone": True},
    "endgameRobotStatus": {"climbL2": True},
    "comments": "quick climb",
}


@pytest.fixture
def log_file(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "scored.jsonl"
    monkeypatch.setattr(telemetry, "LOG_FILE", path)
    return path


def make_service(tmp_path, **settings):
    schema = Repository().load_season("2026-rebuilt")
    store = MatchStore(tmp_path / "matches.json")
    return ScoutingService(schema, store=store, settings=EngineSettings(**settings))


def test_submit_scores_logs_and_stores(tmp_path, log_file):
    service = make_service(tmp_path)
    scored = service.submit(RAW, note="practice")

    assert scored.key == "2026txhou_14_118"
    assert scored.shape == EntryShape.BULK
    assert scored.points == PointTotals(auto=6, teleop=21, endgame=20)
    assert scored.record["auto"]["startPosition"] == 2
    assert scored.record["comments"] == "quick climb"
    assert scored.warnings == []

    doc = service.store.get("2026txhou_14_118")
    assert doc["points"]["totalPoints"] == 47
    assert doc["raw"] == RAW
    assert doc["season"] == "2026-rebuilt"

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == "scored"
    assert event["note"] == "practice"
    assert event["points"]["totalPoints"] == 47
    assert event["entry_id"] == telemetry.make_entry_id(RAW)


def test_put_replaces_same_match(tmp_path, log_file):
    service = make_service(tmp_path)
    service.submit(RAW)
    service.submit(dict(RAW, teleopData={"fuelScoredCount": 1}))
    docs = service.store.all()
    assert len(docs) == 1
    assert docs[0]["points"]["teleopPoints"] == 1


def test_exclusivity_and_input_problems_surface_as_warnings(tmp_path, log_file):
    service = make_service(tmp_path)
    raw = {"endgameRobotStatus": {"climbL1": True, "climbL2": True}, "autoData": {"fuelScoredCount": "3"}}
    scored = service.evaluate(raw)
    assert scored.points.endgame == 30
    assert len(scored.warnings) == 2
    assert any("climb" in w for w in scored.warnings)


def test_exclusivity_report_can_be_disabled(tmp_path, log_file):
    service = make_service(tmp_path, reportExclusivity=False)
    scored = service.evaluate({"endgameRobotStatus": {"climbL1": True, "climbL2": True}})
    assert scored.warnings == []


def test_strict_entries_reject_malformed(tmp_path, log_file):
    service = make_service(tmp_path, strictEntries=True)
    with pytest.raises(RawEntryError):
        service.submit({"autoActions": "fuelScored"})
    assert service.store.all() == []
    assert not log_file.exists()


def test_evaluate_has_no_side_effects(tmp_path, log_file):
    service = make_service(tmp_path)
    service.evaluate(RAW)
    assert service.store.all() == []
    assert not log_file.exists()


def test_rescore_under_other_season(tmp_path, log_file):
    repo = Repository()
    service = ScoutingService(repo.load_season("2025-reefscape"))
    results = service.rescore([RAW, {"autoActions": [{"actionType": "coralPlaceL4"}]}])
    assert [r.points.total for r in results] == [3, 7]
    assert all(r.season == "2025-reefscape" for r in results)
    assert len(telemetry.read_events()) == 2
    assert telemetry.read_events(limit=1)[0]["event"] == "rescored"


def test_match_key_falls_back_to_fingerprint():
    raw = {"matchNumber": 3}
    assert match_key(raw) == telemetry.make_entry_id(raw)
    assert match_key(raw) == match_key({"matchNumber": 3})


def test_repository_settings_and_seasons(tmp_path):
    repo = Repository(tmp_path)
    assert repo.load_settings() == EngineSettings()
    (tmp_path / "settings.json").write_text(json.dumps({"activeSeason": "2025-reefscape", "strictEntries": True}), encoding="utf-8")
    settings = repo.load_settings()
    assert settings.activeSeason == "2025-reefscape"
    assert settings.strictEntries is True
    assert settings.reportExclusivity is True
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
    assert repo.load_settings() == EngineSettings()

    assert repo.list_seasons() == []
    with pytest.raises(UnknownSeasonError):
        repo.load_season("2026-rebuilt")
    repo.save_season_config({"season": "mini", "actions": [{"key": "a", "auto": 1}]})
    assert repo.list_seasons() == ["mini"]
    assert repo.load_season("mini").action_points("a", "auto") == 1
