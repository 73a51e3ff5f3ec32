"""
Recommendation orchestrator.

Runs the quiz-to-movie sequence: validate the quiz, ask the AI model for one
movie, resolve it on TMDB, and wrap the merged result with request metadata.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any

from app.api.models.recommendation import RecommendationMetadata, RecommendationSuccess
from app.core.ai.client import GeminiRecommendationClient
from app.core.quiz.validator import validate_quiz_data
from app.core.tmdb.enrichment import MovieEnricher

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecommendationService:
    """
    High-level recommendation flow.

    This class orchestrates:
    - Quiz payload validation
    - AI movie suggestion
    - TMDB resolution and enrichment

    Failures propagate as RecommendationError subclasses; the caller maps
    their codes to responses.

    Usage:
        service = RecommendationService(ai_client, enricher)
        result = service.recommend(body)
    """

    def __init__(self, ai_client: GeminiRecommendationClient, enricher: MovieEnricher):
        self.ai_client = ai_client
        self.enricher = enricher

    @property
    def ai_model(self) -> str:
        return self.ai_client.model

    def recommend(self, data: Any) -> RecommendationSuccess:
        """
        Produce one enriched recommendation for a decoded quiz body.

        Args:
            data: Decoded JSON request body

        Returns:
            RecommendationSuccess with the recommendation and request metadata.
        """
        start = time.perf_counter()

        quiz = validate_quiz_data(data)
        logger.info(f"Processing {quiz.type} quiz recommendation")

        logger.info("Calling AI service...")
        suggestion = self.ai_client.generate_recommendation(quiz)
        logger.info(f"AI recommended: {suggestion.movie_title}")

        logger.info("Enriching with TMDB data...")
        recommendation = self.enricher.enrich(suggestion)
        logger.info(f"TMDB enrichment complete for ID: {recommendation.tmdb_id}")

        processing_time = int((time.perf_counter() - start) * 1000)
        logger.info(f"Recommendation complete in {processing_time}ms")

        return RecommendationSuccess(
            recommendation=recommendation,
            metadata=RecommendationMetadata(
                quiz_type=quiz.type,
                processing_time=processing_time,
                ai_model=self.ai_model,
                timestamp=utc_timestamp(),
            ),
        )
