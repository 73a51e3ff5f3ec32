"""Google Gemini client for quiz-based movie recommendations."""

import logging
import time
from typing import Optional

import httpx
from google import genai
from google.genai import errors, types

from app.api.config import Settings
from app.api.models.quiz import QuizPayload
from app.api.models.recommendation import AISuggestion
from app.core.ai.parser import parse_ai_response
from app.core.errors import AIAuthenticationError, AIRateLimitError, AIServiceError
from app.core.quiz.prompts import build_prompt

logger = logging.getLogger(__name__)


class GeminiRecommendationClient:
    """
    Asks a Gemini model for one movie matching a quiz.

    Usage:
        client = GeminiRecommendationClient(settings)
        suggestion = client.generate_recommendation(quiz)
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[genai.Client] = None,
        retry_backoff: float = 0.5,
    ):
        """
        Initialize the recommendation client.

        Args:
            settings: Process settings (API key, model name, timeout, retries)
            client: Preconfigured genai client; built lazily from settings if None
            retry_backoff: Base delay in seconds between retries of 5xx replies
                and transport failures
        """
        self.model = settings.gemini_model
        self.api_key = settings.gemini_api_key
        self.timeout = settings.upstream_timeout
        self.max_retries = settings.upstream_max_retries
        self.retry_backoff = retry_backoff
        self._client = client

    @property
    def client(self) -> genai.Client:
        """Underlying genai client, created on first use."""
        if self._client is None:
            if not self.api_key:
                raise AIServiceError("GEMINI_API_KEY is required for AI recommendations")
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
        return self._client

    def generate_recommendation(self, quiz: QuizPayload) -> AISuggestion:
        """
        Generate one movie suggestion for a validated quiz.

        Malformed replies resolve to the fallback suggestion; provider
        failures raise.

        Raises:
            AIAuthenticationError: Provider rejected the API key.
            AIRateLimitError: Provider rate limit exceeded.
            AIServiceError: Any other provider or transport failure.
        """
        prompt = build_prompt(quiz)
        logger.info(f"Calling {self.model} for {quiz.type} quiz recommendation")
        text = self._generate(prompt)
        logger.debug(f"Raw response: {text}")
        return parse_ai_response(text)

    def _generate(self, prompt: str) -> str:
        client = self.client
        attempt = 0
        while True:
            try:
                response = client.models.generate_content(model=self.model, contents=prompt)
                return response.text or ""
            except errors.APIError as e:
                if e.code in (401, 403):
                    raise AIAuthenticationError(
                        "AI service authentication failed. Please check your API key."
                    ) from e
                if e.code == 429:
                    raise AIRateLimitError(
                        "AI service rate limit exceeded. Please try again later."
                    ) from e
                if isinstance(e, errors.ServerError) and attempt < self.max_retries:
                    attempt += 1
                    logger.warning(
                        f"Gemini server error {e.code}, retry {attempt}/{self.max_retries}"
                    )
                    self._backoff(attempt)
                    continue
                logger.error(f"Gemini API error: {e}")
                raise AIServiceError(
                    "Failed to generate movie recommendation. Please try again."
                ) from e
            except httpx.TransportError as e:
                # Timeouts and dropped connections from the SDK's transport
                if attempt < self.max_retries:
                    attempt += 1
                    logger.warning(
                        f"Gemini transport error ({type(e).__name__}), "
                        f"retry {attempt}/{self.max_retries}"
                    )
                    self._backoff(attempt)
                    continue
                logger.error(f"Gemini transport error: {type(e).__name__}: {e}")
                raise AIServiceError(
                    "Failed to generate movie recommendation. Please try again."
                ) from e
            except Exception as e:
                logger.error(f"Error generating recommendation: {e}")
                raise AIServiceError(
                    "Failed to generate movie recommendation. Please try again."
                ) from e

    def _backoff(self, attempt: int) -> None:
        time.sleep(self.retry_backoff * 2 ** (attempt - 1))
