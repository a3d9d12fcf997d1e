import streamlit as st

st.set_page_config(page_title="About", page_icon="ℹ️")

st.title("ℹ️ About Match Scouting")

st.markdown(
    """
This app turns scouting observations into canonical counters and point totals.

- Data-driven scoring: each season is one file in `data/seasons/`; a new season needs no code edits.
- Old action-event entries and current bulk-counter entries are both accepted.
- Use the Seasons page to edit a schema safely (validation included).
    """
)
