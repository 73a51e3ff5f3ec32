"""
Recommendation API endpoints.
"""

import logging
import time
import traceback

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.config import Settings
from app.api.dependencies import get_recommendation_service, get_settings
from app.api.models.recommendation import RecommendationFailure, RecommendationSuccess
from app.core.errors import InvalidQuizDataError, RecommendationError
from app.core.recommendation.service import RecommendationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _failure_response(
    message: str,
    code: str,
    status_code: int,
    settings: Settings,
    start: float,
) -> JSONResponse:
    """Build the failure envelope; details are included only in development."""
    details = None
    if settings.is_development:
        details = {
            "traceback": traceback.format_exc(),
            "processingTime": int((time.perf_counter() - start) * 1000),
        }
    body = RecommendationFailure(error=message, code=code, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@router.post(
    "/recommend",
    response_model=RecommendationSuccess,
    responses={400: {"model": RecommendationFailure}, 500: {"model": RecommendationFailure}},
)
async def recommend(
    request: Request,
    service: RecommendationService = Depends(get_recommendation_service),
    settings: Settings = Depends(get_settings),
):
    """Turn a quiz payload into one AI-picked, TMDB-enriched movie."""
    start = time.perf_counter()
    try:
        try:
            body = await request.json()
        except ValueError as e:
            raise InvalidQuizDataError("Invalid quiz data: body must be valid JSON") from e
        result = await run_in_threadpool(service.recommend, body)
    except RecommendationError as e:
        logger.error(f"Error in recommendation flow ({e.code}): {e.message}")
        return _failure_response(e.message, e.code, e.status_code, settings, start)
    except Exception:
        logger.exception("Unexpected error in recommendation flow")
        return _failure_response(
            "An unexpected error occurred", "INTERNAL_ERROR", 500, settings, start
        )
    content = result.model_dump(by_alias=True)
    # imdbUrl is omitted when TMDB has no IMDb ID; image URLs stay explicit nulls
    if content["recommendation"]["imdbUrl"] is None:
        del content["recommendation"]["imdbUrl"]
    return JSONResponse(content=content)


@router.options("/recommend")
def recommend_preflight():
    """Answer CORS preflight for the recommendation endpoint."""
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)
