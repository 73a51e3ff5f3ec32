"""
Recommendation orchestration package.
"""

from app.core.recommendation.service import RecommendationService

__all__ = ['RecommendationService']
