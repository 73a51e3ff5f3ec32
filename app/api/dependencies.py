"""
FastAPI dependency injection for settings and the recommendation service.
"""

import logging

from app.api.config import Settings, load_settings
from app.core.ai.client import GeminiRecommendationClient
from app.core.recommendation.service import RecommendationService
from app.core.tmdb.client import TMDBClient
from app.core.tmdb.enrichment import MovieEnricher

logger = logging.getLogger(__name__)

# Singletons, built on first request
_settings: Settings | None = None
_service: RecommendationService | None = None


def get_settings() -> Settings:
    """Get or load process settings."""
    global _settings
    if _settings is None:
        _settings = load_settings()
        if not _settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is not set; recommendations will fail")
        if not _settings.tmdb_api_key:
            logger.warning("TMDB_API_KEY is not set; enrichment will fail")
    return _settings


def get_movie_enricher() -> MovieEnricher:
    """Get the enricher of the shared recommendation service."""
    return get_recommendation_service().enricher


def get_recommendation_service() -> RecommendationService:
    """Get or create singleton RecommendationService."""
    global _service
    if _service is None:
        settings = get_settings()
        _service = RecommendationService(
            ai_client=GeminiRecommendationClient(settings),
            enricher=MovieEnricher(TMDBClient(settings)),
        )
        logger.info(f"RecommendationService initialized (model: {settings.gemini_model})")
    return _service
