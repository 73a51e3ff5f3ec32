"""
TMDB metadata enrichment.

This package contains:
- The TMDB HTTP client (search, details, credits)
- Resolution of AI suggestions to canonical records and response assembly
"""

from app.core.tmdb.client import TMDBClient
from app.core.tmdb.enrichment import MovieEnricher, build_movie_recommendation

__all__ = ['TMDBClient', 'MovieEnricher', 'build_movie_recommendation']
