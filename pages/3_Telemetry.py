import streamlit as st

from services import telemetry

st.set_page_config(page_title="Telemetry", page_icon="📊")
st.title("📊 Telemetry")

rows = telemetry.read_events(limit=200)
if not rows:
    st.info("No telemetry yet — score an entry to generate logs.")
    st.stop()

st.caption(f"Showing {len(rows)} most recent events")

for r in rows:
    pts = r.get("points", {})
    with st.expander(f"{r.get('ts')} • {r.get('event')} • {r.get('season')} • {pts.get('totalPoints', '')} pts"):
        st.json(r)
