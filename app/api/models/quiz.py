"""
Pydantic schemas for quiz payloads.

A quiz payload is tagged by ``type``; the tag selects which ``responses``
field set applies.
"""

from typing import Literal, Union

from pydantic import BaseModel


QuizType = Literal["mood", "likes"]


class MoodResponses(BaseModel):
    """Answers collected by the mood quiz."""

    currentMood: str
    desiredFeeling: str
    genre: str
    intensity: str
    setting: str
    companionType: str
    duration: str


class LikesResponses(BaseModel):
    """Answers collected by the likes quiz."""

    favoriteMovies: list[str]
    favoriteGenres: list[str]
    favoriteActors: list[str]
    dislikedGenres: list[str]
    preferredDecade: str
    viewingContext: str


class MoodQuiz(BaseModel):
    """Mood-based quiz payload."""

    type: Literal["mood"] = "mood"
    responses: MoodResponses


class LikesQuiz(BaseModel):
    """Preference-based quiz payload."""

    type: Literal["likes"] = "likes"
    responses: LikesResponses


QuizPayload = Union[MoodQuiz, LikesQuiz]
