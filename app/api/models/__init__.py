"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.quiz import (
    QuizType,
    MoodResponses,
    LikesResponses,
    MoodQuiz,
    LikesQuiz,
    QuizPayload,
)
from app.api.models.recommendation import (
    AISuggestion,
    CastMember,
    MovieRecommendation,
    RecommendationMetadata,
    RecommendationSuccess,
    RecommendationFailure,
)

__all__ = [
    "QuizType",
    "MoodResponses",
    "LikesResponses",
    "MoodQuiz",
    "LikesQuiz",
    "QuizPayload",
    "AISuggestion",
    "CastMember",
    "MovieRecommendation",
    "RecommendationMetadata",
    "RecommendationSuccess",
    "RecommendationFailure",
]
