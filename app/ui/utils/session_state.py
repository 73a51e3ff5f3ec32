"""
Session state helpers for Streamlit.
"""

import streamlit as st

from app.ui.utils.quiz_session import QuizSession

QUIZ_SESSION_KEY = "quiz_session"


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if QUIZ_SESSION_KEY not in st.session_state:
        st.session_state[QUIZ_SESSION_KEY] = QuizSession()


def get_quiz_session() -> QuizSession:
    """Get the quiz session of the current browser session."""
    init_session_state()
    return st.session_state[QUIZ_SESSION_KEY]


def start_quiz(quiz_type: str) -> QuizSession:
    """Reset the quiz session for a new run of the given quiz."""
    session = get_quiz_session()
    session.start(quiz_type)
    return session
