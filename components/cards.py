"""
Points card component.
"""
from __future__ import annotations

import streamlit as st
from domain.models import ScoredEntry


def points_card(scored: ScoredEntry) -> None:
    st.markdown("<div class='points-card'>", unsafe_allow_html=True)
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Auto", scored.points.auto)
    with c2:
        st.metric("Teleop", scored.points.teleop)
    with c3:
        st.metric("Endgame", scored.points.endgame)
    with c4:
        st.metric("Total", scored.points.total)

    if scored.warnings:
        st.subheader("Warnings")
        for w in scored.warnings:
            st.write(f"- {w}")

    st.markdown("</div>", unsafe_allow_html=True)
