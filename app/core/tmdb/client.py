"""
TMDB API client.

Thin wrappers around the three lookups the recommendation flow needs:
title search, movie details and movie credits.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from app.api.config import Settings
from app.core.errors import TMDBServiceError
from app.utils.http import create_session

logger = logging.getLogger(__name__)


class TMDBClient:
    """Handles keyed TMDB requests with timeouts and transient-error retries."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """
        Initialize TMDB client.

        Args:
            settings: Process settings (API key, base URL, timeout, retries)
            session: HTTP session; a retrying session is created if None
        """
        self.api_key = settings.tmdb_api_key
        self.base_url = settings.tmdb_base_url.rstrip("/")
        self.timeout = settings.upstream_timeout
        self.session = session or create_session(max_retries=settings.upstream_max_retries)

    def _get(self, path: str, label: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not self.api_key:
            raise TMDBServiceError("TMDB API key not configured")

        query = {"api_key": self.api_key, "language": "en-US"}
        if params:
            query.update(params)

        try:
            response = self.session.get(f"{self.base_url}{path}", params=query, timeout=self.timeout)
        except requests.RequestException as e:
            # The request URL carries the API key, so only the error type is reported.
            logger.error(f"TMDB {label} request failed: {type(e).__name__}")
            raise TMDBServiceError(f"TMDB {label} request failed: {type(e).__name__}") from e

        if not response.ok:
            raise TMDBServiceError(f"TMDB {label} error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise TMDBServiceError(f"TMDB {label} returned invalid JSON") from e

    def search_movie(self, title: str, year: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Search movies by title, optionally restricted to a release year.

        Returns:
            Result records in TMDB's relevance order (possibly empty).
        """
        params: Dict[str, Any] = {"query": title, "include_adult": "false", "page": 1}
        if year:
            params["year"] = year
        data = self._get("/search/movie", "search", params)
        return data.get("results") or []

    def get_movie_details(self, movie_id: int) -> Dict[str, Any]:
        """Get full details for a movie."""
        return self._get(f"/movie/{movie_id}", "movie details")

    def get_movie_credits(self, movie_id: int) -> Dict[str, Any]:
        """Get cast and crew for a movie."""
        return self._get(f"/movie/{movie_id}/credits", "credits")
