"""
Pydantic schemas for Recommendation API.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class AISuggestion(CamelModel):
    """Single movie proposed by the AI model."""

    movie_title: str
    year: int | None = None
    explanation: str
    match_reasons: list[str]
    confidence_score: float = Field(..., ge=0, le=1)
    alternative_title: str | None = None


class CastMember(CamelModel):
    """Cast entry of a recommended movie."""

    name: str
    character: str | None = None
    profile_url: str | None = None


class MovieRecommendation(CamelModel):
    """AI explanation merged with TMDB facts."""

    # AI-authored
    explanation: str
    match_reasons: list[str]
    confidence_score: float

    # TMDB-authored
    tmdb_id: int
    title: str
    overview: str | None = None
    poster_url: str | None = None
    backdrop_url: str | None = None
    release_date: str | None = None
    genres: list[str] = []
    rating: float = 0.0
    vote_count: int = 0
    runtime: int | None = None
    cast: list[CastMember] = []

    # Watch links
    tmdb_url: str
    imdb_url: str | None = None


class RecommendationMetadata(CamelModel):
    """Request-level metadata returned with a recommendation."""

    quiz_type: str
    processing_time: int
    ai_model: str
    timestamp: str


class RecommendationSuccess(CamelModel):
    """Success envelope for POST /api/recommend."""

    success: bool = True
    recommendation: MovieRecommendation
    metadata: RecommendationMetadata


class RecommendationFailure(CamelModel):
    """Failure envelope for POST /api/recommend."""

    success: bool = False
    error: str
    code: str
    details: dict[str, Any] | None = None
