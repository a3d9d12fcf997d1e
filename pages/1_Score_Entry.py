import json
import streamlit as st

from services.repository import Repository
from services.scouting import ScoutingService
from services.store import MatchStore
from domain.entries import RawEntryError
from components.controls import sidebar_season, entry_form
from components.banners import season_banner
from components.cards import points_card
from components.tables import record_table

st.set_page_config(page_title="Score Entry", page_icon="📝")

repo = Repository()
settings = repo.load_settings()
season = sidebar_season(repo, default=settings.activeSeason)

try:
    schema = repo.load_season(season)
except Exception as e:
    st.error(f"Failed to load season {season}: {e}")
    st.stop()

season_banner(schema)
store = MatchStore(repo.data_dir / "matches" / settings.storeFile)
service = ScoutingService(schema, store=store, settings=settings)

mode = st.sidebar.radio("Input", ["Form", "Paste JSON"], key="input_mode")
if mode == "Form":
    raw = entry_form(schema)
else:
    text = st.text_area("Raw match entry (JSON)", value="{}", height=300)
    try:
        raw = json.loads(text)
    except ValueError as e:
        st.error(f"Invalid JSON: {e}")
        st.stop()
    if not isinstance(raw, dict):
        st.error("A raw match entry must be a JSON object.")
        st.stop()

try:
    scored = service.evaluate(raw)
except RawEntryError as e:
    st.error(str(e))
    st.stop()

points_card(scored)
record_table(scored.record)

if st.button("Save entry"):
    saved = service.submit(raw)
    st.success(f"Saved {saved.key}.")
