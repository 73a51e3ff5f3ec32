"""
Typed errors raised along the recommendation flow.

Each error carries the response code and HTTP status the API reports for it,
so the route maps each failure by its type.
"""


class RecommendationError(Exception):
    """Base class for failures surfaced to API callers."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidQuizDataError(RecommendationError):
    """Quiz payload is missing fields or has the wrong shape."""

    code = "INVALID_QUIZ_DATA"
    status_code = 400


class AIServiceError(RecommendationError):
    """Generative AI provider call failed."""

    code = "AI_API_ERROR"


class AIAuthenticationError(AIServiceError):
    """AI provider rejected the API key."""


class AIRateLimitError(AIServiceError):
    """AI provider rate limit exceeded."""


class TMDBServiceError(RecommendationError):
    """TMDB request failed or TMDB is not configured."""

    code = "TMDB_API_ERROR"


class MovieNotFoundError(RecommendationError):
    """TMDB search returned no record for the suggested title."""

    code = "MOVIE_NOT_FOUND"

    def __init__(self, title: str):
        super().__init__(f"Movie not found: {title}")
        self.title = title
