"""
Season banner component to summarize the active scoring schema.
"""
from __future__ import annotations

import streamlit as st
from domain.schema import ScoringSchema


def season_banner(schema: ScoringSchema) -> None:
    st.markdown(
        f"<div class='season-banner'><strong>Season:</strong> {schema.name} "
        f"(v{schema.version}) • {len(schema.actions)} actions • {len(schema.toggles)} toggles</div>",
        unsafe_allow_html=True,
    )
