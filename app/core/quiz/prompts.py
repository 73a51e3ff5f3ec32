"""Prompt templates for the AI recommendation call, one per quiz type."""

from app.api.models.quiz import LikesQuiz, MoodQuiz, QuizPayload

BASE_INSTRUCTION = """You are a movie recommendation expert. Based on the user's quiz responses, recommend ONE specific movie that perfectly matches their preferences.

IMPORTANT: Respond ONLY with valid JSON in exactly this format:
{
  "movieTitle": "Exact Movie Title",
  "year": 2023,
  "explanation": "2-3 sentence explanation of why this movie fits perfectly",
  "matchReasons": ["reason 1", "reason 2", "reason 3"],
  "confidenceScore": 0.95
}

Make sure the movie title is exact and searchable. Include the release year if there are multiple movies with similar titles."""


def build_mood_prompt(quiz: MoodQuiz) -> str:
    """Prompt for the mood quiz."""
    r = quiz.responses
    return f"""{BASE_INSTRUCTION}

USER'S MOOD PREFERENCES:
- Current mood: {r.currentMood}
- Desired feeling after watching: {r.desiredFeeling}
- Preferred genre: {r.genre}
- Intensity preference: {r.intensity}
- Setting preference: {r.setting}
- Watching with: {r.companionType}
- Available time: {r.duration}

Choose a movie that will transform their current mood into their desired feeling through the story, characters, and emotional journey."""


def build_likes_prompt(quiz: LikesQuiz) -> str:
    """Prompt for the likes quiz."""
    r = quiz.responses
    return f"""{BASE_INSTRUCTION}

USER'S MOVIE PREFERENCES:
- Favorite movies: {", ".join(r.favoriteMovies)}
- Favorite genres: {", ".join(r.favoriteGenres)}
- Favorite actors: {", ".join(r.favoriteActors)}
- Disliked genres: {", ".join(r.dislikedGenres)}
- Preferred era: {r.preferredDecade}
- Viewing context: {r.viewingContext}

Find a movie that shares DNA with their favorites but offers something new they haven't seen."""


def build_prompt(quiz: QuizPayload) -> str:
    """Select and fill the template for the quiz's type."""
    if quiz.type == "mood":
        return build_mood_prompt(quiz)
    return build_likes_prompt(quiz)
