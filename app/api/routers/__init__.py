"""
API route handlers.
"""

from app.api.routers import movies, recommendations, system

__all__ = ["movies", "recommendations", "system"]
