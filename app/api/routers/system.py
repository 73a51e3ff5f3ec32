"""
System API endpoints (health, public client config).
"""

from fastapi import APIRouter, Depends

from app.api.config import Settings
from app.api.dependencies import get_settings

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    """Health check: upstream credentials configured."""
    ai_configured = settings.gemini_api_key is not None
    tmdb_configured = settings.tmdb_api_key is not None
    return {
        "status": "healthy" if ai_configured and tmdb_configured else "degraded",
        "ai_configured": ai_configured,
        "tmdb_configured": tmdb_configured,
        "ai_model": settings.gemini_model,
    }


@router.get("/config")
def public_config(settings: Settings = Depends(get_settings)):
    """Client-side configuration safe to expose to browsers."""
    return {
        "analyticsId": settings.analytics_id,
        "adTagUrl": settings.ad_tag_url,
    }
