"""
Quiz step options and wizard navigation.
"""

import streamlit as st

DURATION_OPTIONS = {
    "short": "Short (< 90 min)",
    "medium": "Medium (90-120 min)",
    "long": "Long (> 120 min)",
    "any": "Any Length",
}

GENRE_OPTIONS = {
    "action": "🎬 Action",
    "comedy": "😄 Comedy",
    "drama": "🎭 Drama",
    "horror": "👻 Horror",
    "romance": "❤️ Romance",
    "sci-fi": "🚀 Sci-Fi",
    "thriller": "🔪 Thriller",
    "documentary": "📹 Documentary",
    "animation": "🎨 Animation",
    "fantasy": "✨ Fantasy",
    "mystery": "🔍 Mystery",
    "western": "🤠 Western",
}

MOOD_OPTIONS = {
    "happy": "Happy & Uplifting",
    "relaxed": "Relaxed & Chill",
    "excited": "Excited & Energetic",
    "thoughtful": "Thoughtful & Reflective",
    "nostalgic": "Nostalgic & Sentimental",
    "adventurous": "Adventurous & Curious",
}

INTENSITY_OPTIONS = {
    "light": "Light & Easy",
    "moderate": "Moderate & Balanced",
    "intense": "Intense & Gripping",
    "extreme": "Extreme & Challenging",
}

DESIRED_FEELING_OPTIONS = {
    "any": "Surprise me",
    "inspired": "Inspired",
    "comforted": "Comforted",
    "thrilled": "Thrilled",
    "amused": "Amused",
    "moved": "Moved",
}

SETTING_OPTIONS = {
    "any": "Anywhere",
    "home": "Cozy night in",
    "theater": "Big screen",
    "travel": "On the go",
}

COMPANION_OPTIONS = {
    "any": "Anyone",
    "alone": "Alone",
    "partner": "Partner",
    "friends": "Friends",
    "family": "Family",
}

DECADE_OPTIONS = {
    "any": "Any era",
    "classic": "Classics (before 1970)",
    "1970s": "1970s",
    "1980s": "1980s",
    "1990s": "1990s",
    "2000s": "2000s",
    "2010s": "2010s",
    "recent": "Recent releases",
}


def render_choice(label: str, options: dict, current: str | None, key: str) -> str:
    """Single-choice radio over an options mapping; returns the selected value."""
    values = list(options)
    index = values.index(current) if current in values else 0
    return st.radio(label, options=values, index=index, format_func=options.get, key=key)


def parse_list(text: str) -> list[str]:
    """Split comma-separated free text into trimmed non-empty entries."""
    return [part.strip() for part in text.split(",") if part.strip()]


def render_wizard_nav(step: int, total: int) -> str | None:
    """
    Render progress and Back/Next (or Get my movie) buttons.

    Returns:
        'back', 'next', 'submit', or None if nothing was clicked.
    """
    st.progress((step + 1) / total, text=f"Step {step + 1} of {total}")
    col1, _, col3 = st.columns([1, 2, 1])
    action = None
    with col1:
        if step > 0 and st.button("← Back", use_container_width=True):
            action = "back"
    with col3:
        if step < total - 1:
            if st.button("Next →", use_container_width=True, type="primary"):
                action = "next"
        elif st.button("🎬 Get my movie", use_container_width=True, type="primary"):
            action = "submit"
    return action
