"""
Typed quiz state carried across Streamlit wizard steps.
"""

from dataclasses import dataclass, field


@dataclass
class MoodAnswers:
    """Answers gathered by the mood quiz."""

    duration: str | None = None
    genre: str | None = None
    current_mood: str | None = None
    intensity: str | None = None
    desired_feeling: str = "any"
    setting: str = "any"
    companion_type: str = "any"

    def to_responses(self) -> dict:
        return {
            "currentMood": self.current_mood,
            "desiredFeeling": self.desired_feeling or "any",
            "genre": self.genre or "any",
            "intensity": self.intensity,
            "setting": self.setting or "any",
            "companionType": self.companion_type or "any",
            "duration": self.duration,
        }


@dataclass
class LikesAnswers:
    """Answers gathered by the likes quiz."""

    favorite_movies: list[str] = field(default_factory=list)
    favorite_genres: list[str] = field(default_factory=list)
    favorite_actors: list[str] = field(default_factory=list)
    disliked_genres: list[str] = field(default_factory=list)
    preferred_decade: str = "any"
    viewing_context: str = "any"

    def to_responses(self) -> dict:
        return {
            "favoriteMovies": list(self.favorite_movies),
            "favoriteGenres": list(self.favorite_genres),
            "favoriteActors": list(self.favorite_actors),
            "dislikedGenres": list(self.disliked_genres),
            "preferredDecade": self.preferred_decade or "any",
            "viewingContext": self.viewing_context or "any",
        }


@dataclass
class QuizSession:
    """Wizard progress, answers and the last API result for one quiz run."""

    quiz_type: str | None = None
    step: int = 0
    mood: MoodAnswers = field(default_factory=MoodAnswers)
    likes: LikesAnswers = field(default_factory=LikesAnswers)
    result: dict | None = None
    # (tmdb_id, title) of past recommendations, newest first; kept across runs
    history: list[tuple[int, str]] = field(default_factory=list)

    def record_result(self, result: dict) -> None:
        """Store an API envelope and remember successful recommendations."""
        self.result = result
        if result.get("success"):
            rec = result["recommendation"]
            entry = (rec["tmdbId"], rec["title"])
            if entry in self.history:
                self.history.remove(entry)
            self.history.insert(0, entry)

    def start(self, quiz_type: str) -> None:
        """Reset state and begin a quiz of the given type."""
        if quiz_type not in ("mood", "likes"):
            raise ValueError(f"Unknown quiz type: {quiz_type}")
        self.quiz_type = quiz_type
        self.step = 0
        self.mood = MoodAnswers()
        self.likes = LikesAnswers()
        self.result = None

    def next_step(self, total_steps: int) -> None:
        self.step = min(self.step + 1, total_steps - 1)

    def previous_step(self) -> None:
        self.step = max(self.step - 1, 0)

    def to_payload(self) -> dict:
        """Request body for POST /api/recommend."""
        if self.quiz_type == "mood":
            return {"type": "mood", "responses": self.mood.to_responses()}
        if self.quiz_type == "likes":
            return {"type": "likes", "responses": self.likes.to_responses()}
        raise ValueError("No quiz in progress")
