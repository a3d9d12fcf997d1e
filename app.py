"""
Match Scouting Score Engine - Main Application Entry Point

This is a thin bootstrapper that configures Streamlit and routes to pages.
All business logic is contained in the domain/ and services/ modules.
"""

import logging

import streamlit as st

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Configure Streamlit page
st.set_page_config(
    page_title="🤖 Match Scouting",
    page_icon="🤖",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for better styling
st.markdown("""
<style>
    .main > div {
        padding-top: 2rem;
    }
    .points-card {
        border: 1px solid #e0e0e0;
        border-radius: 8px;
        padding: 1rem;
        margin: 1rem 0;
        background-color: #fafafa;
    }
    .season-banner {
        background-color: #e8f4f8;
        border-left: 4px solid #1f77b4;
        padding: 0.5rem 1rem;
        margin: 1rem 0;
        border-radius: 4px;
    }
</style>
""", unsafe_allow_html=True)

def main():
    """Main application entry point"""
    st.title("🤖 Match Scouting")
    st.markdown("### Use the Score Entry page from the sidebar to score a match.")
    st.info("""
    📝 **Score Entry** - Capture or paste a match entry and see its points.

    🗂️ **Seasons** - Inspect and edit season scoring schemas.

    📊 **Telemetry** - Browse recently scored entries.
    """)

    with st.expander("📁 Project Structure", expanded=False):
        st.code("""
scouting/
├─ app.py                    # Main entry point
├─ pages/                    # Streamlit pages
├─ components/               # UI components
├─ domain/                   # Schema, aggregation and scoring engines
├─ data/                     # Season schemas, settings, logs, stored matches
├─ services/                 # Repository, store, telemetry, scouting service
├─ scripts/                  # Command-line tools
└─ tests/                    # Unit tests
        """, language="text")

if __name__ == "__main__":
    main()
