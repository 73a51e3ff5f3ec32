"""
Parsing of the model's reply into an AISuggestion.

The model is asked for pure JSON but may wrap it in prose or markdown, so the
first-brace-to-last-brace span is extracted before decoding. Replies that
cannot be used are replaced by a fixed fallback suggestion.
"""

import json
import logging
import re
from typing import Any

from app.api.models.recommendation import AISuggestion

logger = logging.getLogger(__name__)

JSON_SPAN = re.compile(r"\{[\s\S]*\}")

DEFAULT_CONFIDENCE = 0.8

FALLBACK_SUGGESTION = AISuggestion(
    movie_title="The Shawshank Redemption",
    year=1994,
    explanation=(
        "A universally acclaimed drama that resonates with viewers seeking hope, "
        "friendship, and redemption."
    ),
    match_reasons=["Universally loved", "Emotionally satisfying", "Great storytelling"],
    confidence_score=0.7,
)


class ReplyFormatError(ValueError):
    """Reply does not contain a usable recommendation object."""


def clamp_confidence(value: Any) -> float:
    """Clamp a confidence value into [0, 1]; absent, zero or non-numeric gives the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
        value = DEFAULT_CONFIDENCE
    return float(min(max(value, 0.0), 1.0))


def _parse_year(value: Any) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def extract_json_object(text: str) -> dict:
    """Decode the first brace-delimited span of ``text``."""
    match = JSON_SPAN.search(text or "")
    if not match:
        raise ReplyFormatError("No JSON found in AI response")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ReplyFormatError(f"Malformed JSON in AI response: {e}") from e
    if not isinstance(parsed, dict):
        raise ReplyFormatError("AI response JSON is not an object")
    return parsed


def parse_suggestion(text: str) -> AISuggestion:
    """
    Parse a model reply strictly.

    Raises:
        ReplyFormatError: If no JSON object is found or required fields are
            missing.
    """
    parsed = extract_json_object(text)

    title = parsed.get("movieTitle")
    explanation = parsed.get("explanation")
    reasons = parsed.get("matchReasons")
    if (
        not isinstance(title, str) or not title.strip()
        or not isinstance(explanation, str) or not explanation.strip()
        or not isinstance(reasons, list)
        or not all(isinstance(r, str) for r in reasons)
    ):
        raise ReplyFormatError("Invalid AI response format - missing required fields")

    alternative = parsed.get("alternativeTitle")
    return AISuggestion(
        movie_title=title.strip(),
        year=_parse_year(parsed.get("year")),
        explanation=explanation.strip(),
        match_reasons=[r.strip() for r in reasons],
        confidence_score=clamp_confidence(parsed.get("confidenceScore")),
        alternative_title=alternative.strip() if isinstance(alternative, str) else None,
    )


def parse_ai_response(text: str) -> AISuggestion:
    """Parse a model reply, substituting the fallback suggestion if unusable."""
    try:
        return parse_suggestion(text)
    except ReplyFormatError as e:
        logger.error("Error parsing AI response: %s", e)
        logger.error("Raw response: %s", text)
        return FALLBACK_SUGGESTION.model_copy(deep=True)
