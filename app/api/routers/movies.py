"""
Movie lookup API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from app.api.dependencies import get_movie_enricher
from app.api.models.recommendation import MovieRecommendation
from app.core.tmdb.enrichment import MovieEnricher

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("/{tmdb_id}", response_model=MovieRecommendation)
async def get_movie(tmdb_id: int, enricher: MovieEnricher = Depends(get_movie_enricher)):
    """Rebuild a previously recommended movie by TMDB ID."""
    movie = await run_in_threadpool(enricher.get_movie_by_id, tmdb_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie
