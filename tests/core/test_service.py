"""
Unit tests for the recommendation orchestrator.
"""

import copy
import re

import pytest

from app.core.errors import InvalidQuizDataError, MovieNotFoundError
from tests.helpers import AI_REPLY, LIKES_QUIZ, MOOD_QUIZ, SEARCH_RESULTS


class TestRecommendationService:
    """End-to-end flow with fake upstreams."""

    def test_mood_flow(self, service):
        result = service.recommend(copy.deepcopy(MOOD_QUIZ))
        assert result.success is True
        assert result.recommendation.tmdb_id == SEARCH_RESULTS[0]["id"]
        assert len(result.recommendation.match_reasons) == len(AI_REPLY["matchReasons"])
        assert result.metadata.quiz_type == "mood"
        assert result.metadata.ai_model == "gemini-1.5-flash-8b"
        assert result.metadata.processing_time >= 0
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", result.metadata.timestamp)

    def test_likes_flow(self, service, genai_client):
        result = service.recommend(copy.deepcopy(LIKES_QUIZ))
        assert result.metadata.quiz_type == "likes"
        prompt = genai_client.models.generate_content.call_args.kwargs["contents"]
        assert "USER'S MOVIE PREFERENCES" in prompt

    def test_search_uses_ai_title_and_year(self, service, tmdb_session):
        service.recommend(copy.deepcopy(MOOD_QUIZ))
        _, params, _ = tmdb_session.calls[0]
        assert params["query"] == AI_REPLY["movieTitle"]
        assert params["year"] == AI_REPLY["year"]

    def test_invalid_quiz_skips_upstreams(self, service, genai_client, tmdb_session):
        with pytest.raises(InvalidQuizDataError):
            service.recommend({"type": "mood", "responses": {"currentMood": "happy"}})
        genai_client.models.generate_content.assert_not_called()
        assert tmdb_session.calls == []

    def test_not_found_propagates(self, service, tmdb_session):
        tmdb_session.search_results = []
        with pytest.raises(MovieNotFoundError):
            service.recommend(copy.deepcopy(MOOD_QUIZ))

    def test_camel_case_serialization(self, service):
        body = service.recommend(copy.deepcopy(MOOD_QUIZ)).model_dump(by_alias=True)
        assert set(body) == {"success", "recommendation", "metadata"}
        assert {"tmdbId", "matchReasons", "posterUrl", "backdropUrl", "imdbUrl"} <= set(body["recommendation"])
        assert set(body["metadata"]) == {"quizType", "processingTime", "aiModel", "timestamp"}
