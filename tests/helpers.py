"""
Canned upstream payloads and fakes for the Gemini and TMDB clients.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

AI_REPLY = {
    "movieTitle": "Inception",
    "year": 2010,
    "explanation": "A mind-bending heist that rewards close attention.",
    "matchReasons": ["Cerebral sci-fi", "High intensity", "Fits a long evening"],
    "confidenceScore": 0.92,
}

SEARCH_RESULTS = [
    {"id": 27205, "title": "Inception", "release_date": "2010-07-15"},
    {"id": 64956, "title": "Inception: The Cobol Job", "release_date": "2010-12-07"},
]

MOVIE_DETAILS = {
    "id": 27205,
    "title": "Inception",
    "overview": "Cobb, a skilled thief who commits corporate espionage...",
    "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
    "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
    "release_date": "2010-07-15",
    "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
    "vote_average": 8.367,
    "vote_count": 35000,
    "runtime": 148,
    "imdb_id": "tt1375666",
}

MOVIE_CREDITS = {
    "id": 27205,
    "cast": [
        {"id": i, "name": f"Actor {i}", "character": f"Role {i}",
         "profile_path": f"/actor{i}.jpg" if i % 2 else None, "order": i}
        for i in range(8)
    ],
}

MOOD_QUIZ = {
    "type": "mood",
    "responses": {
        "currentMood": "thoughtful",
        "desiredFeeling": "inspired",
        "genre": "sci-fi",
        "intensity": "intense",
        "setting": "home",
        "companionType": "alone",
        "duration": "long",
    },
}

LIKES_QUIZ = {
    "type": "likes",
    "responses": {
        "favoriteMovies": ["The Matrix", "Arrival"],
        "favoriteGenres": ["sci-fi", "drama"],
        "favoriteActors": ["Amy Adams"],
        "dislikedGenres": ["horror"],
        "preferredDecade": "2010s",
        "viewingContext": "solo",
    },
}


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self._payload


class FakeTMDBSession:
    """Routes TMDB paths to canned payloads and records calls."""

    def __init__(self, search_results=None, details=None, credits=None, status_code=200):
        self.search_results = SEARCH_RESULTS if search_results is None else search_results
        self.details = details or MOVIE_DETAILS
        self.credits = credits or MOVIE_CREDITS
        self.status_code = status_code
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.status_code >= 400:
            return FakeResponse({"status_message": "error"}, self.status_code)
        if url.endswith("/search/movie"):
            return FakeResponse({"results": self.search_results})
        if url.endswith("/credits"):
            return FakeResponse(self.credits)
        return FakeResponse(self.details)


def make_genai_client(reply_text):
    """MagicMock genai client whose generate_content returns reply_text."""
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=reply_text)
    return client


