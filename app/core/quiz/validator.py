"""
Quiz payload validation.

Checks presence and shape only; answer values are not matched against the
options the quiz UI offers.
"""

from typing import Any

from pydantic import ValidationError

from app.api.models.quiz import LikesQuiz, MoodQuiz, QuizPayload
from app.core.errors import InvalidQuizDataError

MOOD_REQUIRED_FIELDS = (
    "currentMood",
    "desiredFeeling",
    "genre",
    "intensity",
    "setting",
    "companionType",
    "duration",
)

LIKES_REQUIRED_FIELDS = (
    "favoriteMovies",
    "favoriteGenres",
    "favoriteActors",
    "dislikedGenres",
    "preferredDecade",
    "viewingContext",
)

LIKES_ARRAY_FIELDS = (
    "favoriteMovies",
    "favoriteGenres",
    "favoriteActors",
    "dislikedGenres",
)


def _is_blank(value: Any) -> bool:
    # Empty lists and objects still count as present.
    if isinstance(value, (list, dict)):
        return False
    return not value


def validate_quiz_data(data: Any) -> QuizPayload:
    """
    Validate a decoded request body as a quiz payload.

    Args:
        data: Decoded JSON body of any type

    Returns:
        MoodQuiz or LikesQuiz, selected by the payload's ``type``.

    Raises:
        InvalidQuizDataError: If the body is not an object, the tag is
            missing or unknown, or a field required by the tag is missing
            or mistyped.
    """
    if not isinstance(data, dict):
        raise InvalidQuizDataError("Invalid quiz data: must be an object")

    quiz_type = data.get("type")
    responses = data.get("responses")
    if not quiz_type or _is_blank(responses):
        raise InvalidQuizDataError("Invalid quiz data: missing type or responses")

    if quiz_type not in ("mood", "likes"):
        raise InvalidQuizDataError('Invalid quiz data: type must be "mood" or "likes"')

    if not isinstance(responses, dict):
        raise InvalidQuizDataError("Invalid quiz data: responses must be an object")

    if quiz_type == "mood":
        for field in MOOD_REQUIRED_FIELDS:
            if _is_blank(responses.get(field)):
                raise InvalidQuizDataError(f"Invalid mood quiz data: missing {field}")
        model = MoodQuiz
    else:
        for field in LIKES_REQUIRED_FIELDS:
            if _is_blank(responses.get(field)):
                raise InvalidQuizDataError(f"Invalid likes quiz data: missing {field}")
        for field in LIKES_ARRAY_FIELDS:
            if not isinstance(responses[field], list):
                raise InvalidQuizDataError(
                    f"Invalid likes quiz data: {field} must be an array"
                )
        model = LikesQuiz

    try:
        return model.model_validate({"type": quiz_type, "responses": responses})
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidQuizDataError(
            f"Invalid {quiz_type} quiz data: {location}: {first['msg']}"
        ) from e
