"""
Generative AI recommendation client.

This package contains:
- The Gemini client that sends the quiz prompt
- Reply parsing with confidence clamping and a fixed fallback
"""

from app.core.ai.client import GeminiRecommendationClient
from app.core.ai.parser import FALLBACK_SUGGESTION, parse_ai_response

__all__ = ['GeminiRecommendationClient', 'FALLBACK_SUGGESTION', 'parse_ai_response']
