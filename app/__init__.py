"""
FilmFinder Application Package.

This package contains the quiz-to-movie recommendation API, its upstream
clients (Gemini, TMDB), and the Streamlit quiz UI.
"""

__version__ = "1.0.0"
