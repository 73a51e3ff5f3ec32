"""
Unit tests for quiz payload validation.
"""

import copy

import pytest

from app.api.models.quiz import LikesQuiz, MoodQuiz
from app.core.errors import InvalidQuizDataError
from app.core.quiz.validator import MOOD_REQUIRED_FIELDS, LIKES_REQUIRED_FIELDS, validate_quiz_data
from tests.helpers import LIKES_QUIZ, MOOD_QUIZ


def _without(payload: dict, field: str) -> dict:
    data = copy.deepcopy(payload)
    del data["responses"][field]
    return data


class TestValidQuizzes:
    """Well-formed payloads are returned as typed models."""

    def test_mood_quiz(self):
        quiz = validate_quiz_data(copy.deepcopy(MOOD_QUIZ))
        assert isinstance(quiz, MoodQuiz)
        assert quiz.type == "mood"
        assert quiz.responses.intensity == "intense"

    def test_likes_quiz(self):
        quiz = validate_quiz_data(copy.deepcopy(LIKES_QUIZ))
        assert isinstance(quiz, LikesQuiz)
        assert quiz.responses.favoriteMovies == ["The Matrix", "Arrival"]

    def test_likes_quiz_accepts_empty_arrays(self):
        """An empty list is an answer, not a missing field."""
        data = copy.deepcopy(LIKES_QUIZ)
        data["responses"]["favoriteActors"] = []
        quiz = validate_quiz_data(data)
        assert quiz.responses.favoriteActors == []

    def test_answer_values_are_not_restricted(self):
        data = copy.deepcopy(MOOD_QUIZ)
        data["responses"]["genre"] = "something-new"
        assert validate_quiz_data(data).responses.genre == "something-new"


class TestInvalidQuizzes:
    """Shape errors raise InvalidQuizDataError."""

    @pytest.mark.parametrize("body", [None, "mood", 42, ["mood"]])
    def test_body_must_be_object(self, body):
        with pytest.raises(InvalidQuizDataError, match="must be an object"):
            validate_quiz_data(body)

    def test_missing_type_or_responses(self):
        with pytest.raises(InvalidQuizDataError, match="missing type or responses"):
            validate_quiz_data({})
        with pytest.raises(InvalidQuizDataError, match="missing type or responses"):
            validate_quiz_data({"type": "mood"})

    def test_unknown_type(self):
        with pytest.raises(InvalidQuizDataError, match='"mood" or "likes"'):
            validate_quiz_data({"type": "vibes", "responses": {"a": 1}})

    def test_responses_must_be_object(self):
        with pytest.raises(InvalidQuizDataError):
            validate_quiz_data({"type": "mood", "responses": ["happy"]})

    def test_empty_responses_reports_first_field(self):
        with pytest.raises(InvalidQuizDataError, match="missing currentMood"):
            validate_quiz_data({"type": "mood", "responses": {}})
        with pytest.raises(InvalidQuizDataError, match="missing favoriteMovies"):
            validate_quiz_data({"type": "likes", "responses": {}})

    def test_empty_array_responses_is_not_an_object(self):
        with pytest.raises(InvalidQuizDataError, match="responses must be an object"):
            validate_quiz_data({"type": "likes", "responses": []})

    @pytest.mark.parametrize("field", MOOD_REQUIRED_FIELDS)
    def test_mood_missing_field(self, field):
        with pytest.raises(InvalidQuizDataError, match=f"missing {field}"):
            validate_quiz_data(_without(MOOD_QUIZ, field))

    @pytest.mark.parametrize("field", LIKES_REQUIRED_FIELDS)
    def test_likes_missing_field(self, field):
        with pytest.raises(InvalidQuizDataError, match=f"missing {field}"):
            validate_quiz_data(_without(LIKES_QUIZ, field))

    def test_mood_missing_intensity(self):
        with pytest.raises(InvalidQuizDataError):
            validate_quiz_data(_without(MOOD_QUIZ, "intensity"))

    def test_mood_blank_field(self):
        data = copy.deepcopy(MOOD_QUIZ)
        data["responses"]["duration"] = ""
        with pytest.raises(InvalidQuizDataError, match="missing duration"):
            validate_quiz_data(data)

    def test_likes_genres_not_array(self):
        data = copy.deepcopy(LIKES_QUIZ)
        data["responses"]["favoriteGenres"] = "sci-fi"
        with pytest.raises(InvalidQuizDataError, match="favoriteGenres must be an array"):
            validate_quiz_data(data)

    def test_mood_field_wrong_type(self):
        data = copy.deepcopy(MOOD_QUIZ)
        data["responses"]["intensity"] = 7
        with pytest.raises(InvalidQuizDataError, match="intensity"):
            validate_quiz_data(data)
