import json
import streamlit as st
from services.repository import Repository, UnknownSeasonError

st.set_page_config(page_title="Seasons", page_icon="🗂️")

st.title("🗂️ Season Schemas")

repo = Repository()
seasons = repo.list_seasons()
if not seasons:
    st.info("No season files yet — add one under data/seasons.")
    st.stop()

season = st.selectbox("Season", seasons)

try:
    data = repo.load_season_config(season)
except (UnknownSeasonError, ValueError) as e:
    st.error(f"Failed to load season: {e}")
    st.stop()

content = st.text_area(f"Edit {season}.json", value=json.dumps(data, indent=2, ensure_ascii=False), height=400)

if st.button("Save"):
    try:
        new_data = json.loads(content)
        from domain.validators import validate_season_config
        validate_season_config(new_data)
        fp = repo.save_season_config(new_data)
        st.success(f"Saved {fp.name}.")
    except ValueError as e:
        st.error(f"Save failed: {e}")
