"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def get_recommendation(payload: dict) -> dict:
    """
    Submit a quiz payload.

    Returns the success or failure envelope; raises only when the API does
    not answer with JSON.
    """
    r = requests.post(
        f"{get_api_base_url()}/api/recommend",
        json=payload,
        timeout=60,
    )
    try:
        return r.json()
    except ValueError:
        r.raise_for_status()
        raise


def get_movie(tmdb_id: int) -> dict:
    """Get a previously recommended movie by TMDB ID."""
    r = requests.get(f"{get_api_base_url()}/api/movies/{tmdb_id}", timeout=30)
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
