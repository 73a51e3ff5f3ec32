"""
Streamlit main app for FilmFinder.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from app.ui.utils.session_state import init_session_state, start_quiz

st.set_page_config(
    page_title="FilmFinder",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 FilmFinder")
st.markdown("Answer a few quick questions and get one movie picked just for you.")

# Check API health
try:
    from app.ui.utils.api_client import health_check
    health = health_check()
    if health.get("status") == "healthy":
        st.success("API connected")
    else:
        st.warning("API is running but upstream API keys are not fully configured")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn app.api.main:app --host 0.0.0.0 --port 8000")

st.divider()

col1, col2 = st.columns(2)
with col1:
    st.subheader("🌈 Match my mood")
    st.caption("Tell us how you feel and how much time you have.")
    if st.button("Start mood quiz", use_container_width=True):
        start_quiz("mood")
        st.switch_page("pages/1_mood_quiz.py")
with col2:
    st.subheader("💜 Based on what I like")
    st.caption("Tell us your favorite movies, genres and actors.")
    if st.button("Start likes quiz", use_container_width=True):
        start_quiz("likes")
        st.switch_page("pages/2_likes_quiz.py")
