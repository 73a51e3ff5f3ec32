"""
Mood quiz page - step-by-step wizard ending in a recommendation request.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from app.ui.utils.api_client import get_recommendation
from app.ui.utils.session_state import get_quiz_session, start_quiz
from app.ui.components.quiz_steps import (
    COMPANION_OPTIONS,
    DESIRED_FEELING_OPTIONS,
    DURATION_OPTIONS,
    GENRE_OPTIONS,
    INTENSITY_OPTIONS,
    MOOD_OPTIONS,
    SETTING_OPTIONS,
    render_choice,
    render_wizard_nav,
)

STEPS = [
    ("How much time do you have?", "Select your preferred movie duration."),
    ("What genre interests you?", "Choose the genre you're in the mood for."),
    ("How are you feeling?", "Tell us about your current mood."),
    ("How intense do you want it?", "Select the level of emotional intensity you prefer."),
    ("Anything else?", "Optional details to fine-tune the pick."),
]

session = get_quiz_session()
if session.quiz_type != "mood":
    session = start_quiz("mood")
answers = session.mood

st.title("🌈 Mood Quiz")
title, description = STEPS[session.step]
st.subheader(title)
st.caption(description)

if session.step == 0:
    answers.duration = render_choice("Duration", DURATION_OPTIONS, answers.duration, "mood_duration")
elif session.step == 1:
    answers.genre = render_choice("Genre", GENRE_OPTIONS, answers.genre, "mood_genre")
elif session.step == 2:
    answers.current_mood = render_choice("Mood", MOOD_OPTIONS, answers.current_mood, "mood_current")
elif session.step == 3:
    answers.intensity = render_choice("Intensity", INTENSITY_OPTIONS, answers.intensity, "mood_intensity")
else:
    answers.desired_feeling = render_choice(
        "How do you want to feel afterwards?", DESIRED_FEELING_OPTIONS,
        answers.desired_feeling, "mood_feeling",
    )
    answers.setting = render_choice("Where are you watching?", SETTING_OPTIONS, answers.setting, "mood_setting")
    answers.companion_type = render_choice(
        "Who are you watching with?", COMPANION_OPTIONS, answers.companion_type, "mood_companion"
    )

action = render_wizard_nav(session.step, len(STEPS))
if action == "back":
    session.previous_step()
    st.rerun()
elif action == "next":
    session.next_step(len(STEPS))
    st.rerun()
elif action == "submit":
    with st.spinner("Finding your movie..."):
        try:
            session.record_result(get_recommendation(session.to_payload()))
        except Exception as e:
            st.error(f"Failed to get a recommendation: {e}")
            st.stop()
    st.switch_page("pages/3_results.py")
