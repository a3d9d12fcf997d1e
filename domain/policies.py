"""
Engine settings model with defaults; kept pure (no file IO here).
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineSettings:
    version: str = "1.0.0"
    activeSeason: str = "2026-rebuilt"
    strictEntries: bool = False
    reportExclusivity: bool = True
    storeFile: str = "matches.json"
