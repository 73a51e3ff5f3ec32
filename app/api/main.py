"""
FastAPI application entry point for FilmFinder API.

Run: uvicorn app.api.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from app.api.routers import movies, recommendations, system
from app.utils.logging_config import configure_api_logging

configure_api_logging(debug=get_log_level() == "DEBUG", log_file=get_log_file())

app = FastAPI(
    title="FilmFinder API",
    description="Quiz-based movie recommendations from Gemini, enriched with TMDB metadata",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendations.router)
app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "FilmFinder API",
        "docs": "/docs",
        "health": "/api/health",
        "recommend": "/api/recommend",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
