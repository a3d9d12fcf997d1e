"""
Repository helpers for reading the JSON data files used by the app
(season scoring schemas and engine settings).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from domain.policies import EngineSettings
from domain.schema import ScoringSchema

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class UnknownSeasonError(KeyError):
    """Raised when no season file exists for the requested season."""


class Repository:
    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir or DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def seasons_dir(self) -> Path:
        return self.data_dir / "seasons"

    def list_seasons(self) -> List[str]:
        if not self.seasons_dir.exists():
            return []
        return sorted(fp.stem for fp in self.seasons_dir.glob("*.json"))

    def load_season_config(self, season: str) -> Dict[str, Any]:
        fp = self.seasons_dir / f"{season}.json"
        if not fp.exists():
            raise UnknownSeasonError(season)
        with fp.open("r", encoding="utf-8") as f:
            return json.load(f)

    def load_season(self, season: str) -> ScoringSchema:
        """Load and validate a season schema; config errors propagate."""
        return ScoringSchema.from_config(self.load_season_config(season))

    def save_season_config(self, data: Dict[str, Any]) -> Path:
        # Validate before touching the file
        schema = ScoringSchema.from_config(data)
        self.seasons_dir.mkdir(parents=True, exist_ok=True)
        fp = self.seasons_dir / f"{schema.season}.json"
        with fp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return fp

    def load_settings(self) -> EngineSettings:
        fp = self.data_dir / "settings.json"
        if not fp.exists():
            return EngineSettings()
        try:
            raw = json.loads(fp.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s (%s); using default settings", fp, e)
            return EngineSettings()
        settings = EngineSettings()
        settings.version = str(raw.get("version", settings.version))
        settings.activeSeason = str(raw.get("activeSeason", settings.activeSeason))
        settings.strictEntries = bool(raw.get("strictEntries", settings.strictEntries))
        settings.reportExclusivity = bool(raw.get("reportExclusivity", settings.reportExclusivity))
        settings.storeFile = str(raw.get("storeFile", settings.storeFile))
        return settings
