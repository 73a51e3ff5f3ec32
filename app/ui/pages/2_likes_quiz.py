"""
Likes quiz page - favorites and preferences wizard.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from app.ui.utils.api_client import get_recommendation
from app.ui.utils.session_state import get_quiz_session, start_quiz
from app.ui.components.quiz_steps import (
    DECADE_OPTIONS,
    GENRE_OPTIONS,
    parse_list,
    render_choice,
    render_wizard_nav,
)

STEPS = [
    ("Which movies do you love?", "List a few favorites, separated by commas."),
    ("Genres and actors", "Pick what you enjoy and what you'd rather skip."),
    ("Era and occasion", "When was it made, and what's the occasion?"),
]

session = get_quiz_session()
if session.quiz_type != "likes":
    session = start_quiz("likes")
answers = session.likes

st.title("💜 Likes Quiz")
title, description = STEPS[session.step]
st.subheader(title)
st.caption(description)

step_complete = True
if session.step == 0:
    movies_text = st.text_area(
        "Favorite movies",
        value=", ".join(answers.favorite_movies),
        placeholder="e.g. Inception, Amélie, The Godfather",
    )
    answers.favorite_movies = parse_list(movies_text)
    step_complete = bool(answers.favorite_movies)
elif session.step == 1:
    genre_values = list(GENRE_OPTIONS)
    answers.favorite_genres = st.multiselect(
        "Favorite genres", options=genre_values,
        default=answers.favorite_genres, format_func=GENRE_OPTIONS.get,
    )
    answers.disliked_genres = st.multiselect(
        "Genres to avoid",
        options=[g for g in genre_values if g not in answers.favorite_genres],
        default=[g for g in answers.disliked_genres if g not in answers.favorite_genres],
        format_func=GENRE_OPTIONS.get,
    )
    actors_text = st.text_input(
        "Favorite actors (optional)",
        value=", ".join(answers.favorite_actors),
        placeholder="e.g. Tilda Swinton, Denzel Washington",
    )
    answers.favorite_actors = parse_list(actors_text)
    step_complete = bool(answers.favorite_genres)
else:
    answers.preferred_decade = render_choice(
        "Preferred era", DECADE_OPTIONS, answers.preferred_decade, "likes_decade"
    )
    answers.viewing_context = st.text_input(
        "Viewing context", value=answers.viewing_context,
        placeholder="e.g. date night, solo on a rainy Sunday",
    ).strip() or "any"

if not step_complete:
    st.info("Fill in this step to continue.")

action = render_wizard_nav(session.step, len(STEPS))
if action == "back":
    session.previous_step()
    st.rerun()
elif action == "next" and step_complete:
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
