"""
Sidebar and form controls for picking a season and capturing a match entry.
Stateless: reads/writes state through return values.
"""
from __future__ import annotations

import streamlit as st
from typing import Any, Dict, List

from domain.models import Phase, SCORED_PHASES, BULK_FIELDS, STATUS_FIELDS, START_POSITION_FIELD
from domain.schema import ScoringSchema
from services.repository import Repository

START_POSITIONS = 6


def sidebar_season(repo: Repository, default: str) -> str:
    seasons: List[str] = repo.list_seasons()
    if not seasons:
        st.sidebar.error("No season files found in data/seasons.")
        st.stop()
    index = seasons.index(default) if default in seasons else 0
    return st.sidebar.selectbox("Season", seasons, index=index, key="season")


def _exclusive_radio(phase: Phase, group: str, keys: tuple) -> Dict[str, bool]:
    """One radio per mutual-exclusion group keeps captured entries exclusive."""
    options = ["None"] + list(keys)
    choice = st.radio(group.title(), options, horizontal=True, key=f"{phase.value}_{group}")
    return {k: k == choice for k in keys}


def entry_form(schema: ScoringSchema) -> Dict[str, Any]:
    """Render capture widgets for every declared key; returns a bulk-shape raw entry."""
    raw: Dict[str, Any] = {}
    c1, c2, c3 = st.columns(3)
    with c1:
        raw["eventKey"] = st.text_input("Event", value="", key="eventKey").strip() or None
    with c2:
        raw["matchNumber"] = st.number_input("Match", min_value=0, step=1, key="matchNumber") or None
    with c3:
        raw["teamNumber"] = st.number_input("Team", min_value=0, step=1, key="teamNumber") or None

    pos = st.radio("Start position", ["None"] + [str(i) for i in range(START_POSITIONS)], horizontal=True, key="startPos")
    raw[START_POSITION_FIELD] = [pos == str(i) for i in range(START_POSITIONS)]

    for phase in Phase:
        st.subheader(phase.value.title())
        if phase in SCORED_PHASES:
            counters = {}
            for key in schema.list_action_keys():
                field = schema.counter_key(key)
                counters[field] = int(st.number_input(field, min_value=0, step=1, key=f"{phase.value}_{field}"))
            raw[BULK_FIELDS[phase]] = counters
        flags: Dict[str, bool] = {}
        grouped = schema.exclusion_groups(phase)
        for group, keys in grouped.items():
            flags.update(_exclusive_radio(phase, group, keys))
        for key in schema.list_toggle_keys(phase):
            if key not in flags:
                flags[key] = st.checkbox(key, key=f"{phase.value}_{key}")
        raw[STATUS_FIELDS[phase]] = flags

    raw["comments"] = st.text_area("Comments", value="", key="comments")
    return {k: v for k, v in raw.items() if v is not None}
