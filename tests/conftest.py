"""
Shared fixtures: settings, a fake Gemini client and a fake TMDB session.
"""

import json

import pytest

from app.api.config import Settings
from app.core.ai.client import GeminiRecommendationClient
from app.core.recommendation.service import RecommendationService
from app.core.tmdb.client import TMDBClient
from app.core.tmdb.enrichment import MovieEnricher
from tests.helpers import AI_REPLY, FakeTMDBSession, make_genai_client


@pytest.fixture
def settings():
    """Settings with both keys configured and no retries."""
    return Settings(
        gemini_api_key="test-gemini-key",
        tmdb_api_key="test-tmdb-key",
        upstream_timeout=5,
        upstream_max_retries=0,
    )


@pytest.fixture
def tmdb_session():
    """Fake TMDB session with one Inception match."""
    return FakeTMDBSession()


@pytest.fixture
def genai_client():
    """Fake Gemini client replying with AI_REPLY wrapped in prose."""
    return make_genai_client(f"Here is my pick:\n```json\n{json.dumps(AI_REPLY)}\n```")


@pytest.fixture
def service(settings, genai_client, tmdb_session):
    """RecommendationService wired to fake upstreams."""
    return RecommendationService(
        ai_client=GeminiRecommendationClient(settings, client=genai_client, retry_backoff=0),
        enricher=MovieEnricher(TMDBClient(settings, session=tmdb_session)),
    )
