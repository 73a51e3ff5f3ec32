"""
Enrichment of AI suggestions with TMDB metadata.

Resolves a suggested title to TMDB's first search result, fetches details and
credits for it concurrently, and merges them with the AI explanation.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional, Tuple

from app.api.models.recommendation import AISuggestion, CastMember, MovieRecommendation
from app.core.errors import MovieNotFoundError, TMDBServiceError
from app.core.tmdb.client import TMDBClient

logger = logging.getLogger(__name__)

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
IMAGE_BASE_URL_LARGE = "https://image.tmdb.org/t/p/w1280"
TMDB_MOVIE_URL = "https://www.themoviedb.org/movie/{}"
IMDB_TITLE_URL = "https://www.imdb.com/title/{}"
TOP_CAST = 5


def image_url(path: Optional[str], size: str = "small") -> Optional[str]:
    """Absolute image URL for a TMDB path ('small' = w500, 'large' = w1280)."""
    if not path:
        return None
    base = IMAGE_BASE_URL_LARGE if size == "large" else IMAGE_BASE_URL
    return f"{base}{path}"


def round_rating(value: Optional[float]) -> float:
    """Round half up to one decimal."""
    return math.floor((value or 0) * 10 + 0.5) / 10


def build_movie_recommendation(
    suggestion: AISuggestion,
    details: Dict[str, Any],
    credits: Dict[str, Any],
) -> MovieRecommendation:
    """Merge AI-authored fields with TMDB details and credits."""
    movie_id = details["id"]
    imdb_id = details.get("imdb_id")
    cast = [
        CastMember(
            name=member.get("name", ""),
            character=member.get("character"),
            profile_url=image_url(member.get("profile_path")),
        )
        for member in (credits.get("cast") or [])[:TOP_CAST]
    ]
    return MovieRecommendation(
        explanation=suggestion.explanation,
        match_reasons=list(suggestion.match_reasons),
        confidence_score=suggestion.confidence_score,
        tmdb_id=movie_id,
        title=details.get("title", suggestion.movie_title),
        overview=details.get("overview"),
        poster_url=image_url(details.get("poster_path")),
        backdrop_url=image_url(details.get("backdrop_path"), size="large"),
        release_date=details.get("release_date"),
        genres=[g["name"] for g in details.get("genres") or []],
        rating=round_rating(details.get("vote_average")),
        vote_count=details.get("vote_count") or 0,
        runtime=details.get("runtime"),
        cast=cast,
        tmdb_url=TMDB_MOVIE_URL.format(movie_id),
        imdb_url=IMDB_TITLE_URL.format(imdb_id) if imdb_id else None,
    )


class MovieEnricher:
    """Resolves AI suggestions to canonical TMDB records."""

    def __init__(self, tmdb_client: TMDBClient):
        self.tmdb = tmdb_client

    def _fetch_details_and_credits(self, movie_id: int) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        with ThreadPoolExecutor(max_workers=2) as executor:
            details_future = executor.submit(self.tmdb.get_movie_details, movie_id)
            credits_future = executor.submit(self.tmdb.get_movie_credits, movie_id)
            return details_future.result(), credits_future.result()

    def enrich(self, suggestion: AISuggestion) -> MovieRecommendation:
        """
        Build the final recommendation for an AI suggestion.

        The first search result is taken as the match; the suggestion's year
        is the only disambiguation.

        Raises:
            MovieNotFoundError: Search returned no results.
            TMDBServiceError: A TMDB request failed.
        """
        results = self.tmdb.search_movie(suggestion.movie_title, suggestion.year)
        if not results:
            raise MovieNotFoundError(suggestion.movie_title)

        movie_id = results[0]["id"]
        logger.info(f"Resolved '{suggestion.movie_title}' to TMDB ID {movie_id}")
        details, credits = self._fetch_details_and_credits(movie_id)
        return build_movie_recommendation(suggestion, details, credits)

    def get_movie_by_id(self, tmdb_id: int) -> Optional[MovieRecommendation]:
        """Rebuild a recommendation for a previously recommended TMDB ID, or None on failure."""
        try:
            details, credits = self._fetch_details_and_credits(tmdb_id)
        except TMDBServiceError as e:
            logger.error(f"Error getting movie by ID {tmdb_id}: {e}")
            return None

        release_date = details.get("release_date") or ""
        history = AISuggestion(
            movie_title=details.get("title", ""),
            year=int(release_date[:4]) if release_date[:4].isdigit() else None,
            explanation="Previously recommended movie from your history.",
            match_reasons=["From your recommendation history"],
            confidence_score=0.8,
        )
        return build_movie_recommendation(history, details, credits)
