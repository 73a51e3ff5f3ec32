"""
Results page - the recommended movie, or the API error.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from app.ui.utils.api_client import get_movie, get_recommendation
from app.ui.utils.session_state import get_quiz_session
from app.ui.components.movie_card import metadata_caption, render_movie_card

ERROR_HINTS = {
    "INVALID_QUIZ_DATA": "Some quiz answers are missing. Please retake the quiz.",
    "MOVIE_NOT_FOUND": "We couldn't find that movie's details. Try again for another pick.",
    "AI_API_ERROR": "The recommendation service is busy. Please try again in a moment.",
    "TMDB_API_ERROR": "The movie database is unavailable. Please try again in a moment.",
}

session = get_quiz_session()

st.title("🍿 Your Movie")

result = session.result
if result is None:
    st.info("Take a quiz to get your recommendation.")
    if st.button("Go to quizzes"):
        st.switch_page("app.py")
    st.stop()

if result.get("success"):
    render_movie_card(result["recommendation"])
    caption = metadata_caption(result.get("metadata"))
    if caption:
        st.caption(caption)
else:
    st.error(result.get("error", "Something went wrong"))
    hint = ERROR_HINTS.get(result.get("code"))
    if hint:
        st.info(hint)

st.divider()
col1, col2 = st.columns(2)
with col1:
    if session.quiz_type and st.button("🔄 Try another pick", use_container_width=True):
        with st.spinner("Finding another movie..."):
            try:
                session.record_result(get_recommendation(session.to_payload()))
            except Exception as e:
                st.error(f"Failed to get a recommendation: {e}")
                st.stop()
        st.rerun()
with col2:
    if st.button("🏠 Start over", use_container_width=True):
        st.switch_page("app.py")

if len(session.history) > 1:
    st.subheader("Previously recommended")
    for tmdb_id, title in session.history[1:]:
        if st.button(title, key=f"history_{tmdb_id}"):
            try:
                movie = get_movie(tmdb_id)
                session.result = {"success": True, "recommendation": movie}
                st.rerun()
            except Exception as e:
                st.error(f"Failed to load {title}: {e}")
