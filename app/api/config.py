"""
API configuration loaded from environment or defaults.

The getters read a single environment variable each. ``load_settings``
collects them into one immutable ``Settings`` object at process start;
clients receive that object instead of reading the environment themselves.
"""

import os

from pydantic import BaseModel


DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-8b"
DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"


def get_gemini_api_key() -> str | None:
    """Get Gemini API key from env (None if unset)."""
    return os.getenv("GEMINI_API_KEY") or None


def get_gemini_model() -> str:
    """Get Gemini model name."""
    return os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)


def get_tmdb_api_key() -> str | None:
    """Get TMDB API key from env (None if unset)."""
    return os.getenv("TMDB_API_KEY") or None


def get_tmdb_base_url() -> str:
    """Get TMDB API base URL."""
    return os.getenv("TMDB_BASE_URL", DEFAULT_TMDB_BASE_URL).rstrip("/")


def get_upstream_timeout() -> float:
    """Get timeout in seconds for upstream API calls."""
    return float(os.getenv("UPSTREAM_TIMEOUT", "15"))


def get_upstream_max_retries() -> int:
    """Get retry budget for transient upstream failures."""
    return int(os.getenv("UPSTREAM_MAX_RETRIES", "2"))


def get_analytics_id() -> str | None:
    """Get optional analytics measurement ID."""
    return os.getenv("ANALYTICS_ID") or None


def get_ad_tag_url() -> str | None:
    """Get optional ad tag URL."""
    return os.getenv("AD_TAG_URL") or None


def get_environment() -> str:
    """Get deployment environment name ('development' or 'production')."""
    return os.getenv("APP_ENV", "production").lower()


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name (written under logs/)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


class Settings(BaseModel):
    """Process-wide configuration passed into the upstream clients."""

    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    tmdb_api_key: str | None = None
    tmdb_base_url: str = DEFAULT_TMDB_BASE_URL
    upstream_timeout: float = 15.0
    upstream_max_retries: int = 2
    analytics_id: str | None = None
    ad_tag_url: str | None = None
    environment: str = "production"

    class Config:
        frozen = True

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        gemini_api_key=get_gemini_api_key(),
        gemini_model=get_gemini_model(),
        tmdb_api_key=get_tmdb_api_key(),
        tmdb_base_url=get_tmdb_base_url(),
        upstream_timeout=get_upstream_timeout(),
        upstream_max_retries=get_upstream_max_retries(),
        analytics_id=get_analytics_id(),
        ad_tag_url=get_ad_tag_url(),
        environment=get_environment(),
    )
