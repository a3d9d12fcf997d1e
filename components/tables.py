"""
Tables component for canonical record views.
"""
from __future__ import annotations

import streamlit as st
from typing import Any, Dict

from domain.models import Phase


def record_table(record: Dict[str, Any]) -> None:
    cols = st.columns(len(Phase))
    for col, phase in zip(cols, Phase):
        with col:
            st.caption(phase.value.title())
            st.table({"value": {k: str(v) for k, v in record.get(phase.value, {}).items()}})
    extras = {k: v for k, v in record.items() if k not in {p.value for p in Phase}}
    if extras:
        st.caption("Other fields")
        st.json(extras)
