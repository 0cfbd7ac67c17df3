"""
Scoring API - Application.

============================================================
RESPONSIBILITY
============================================================
Builds the FastAPI application serving the scoring engine.

Run with:
    uvicorn scoring_api.main:create_app --factory --port 8000
============================================================
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from decision_scoring import ScoringSettings, load_settings
from decision_scoring.logging_setup import setup_logging
from scoring_api.routers import analysis, health

logger = logging.getLogger(__name__)


def create_app(settings: Optional[ScoringSettings] = None) -> FastAPI:
    """
    Create the API application.

    Args:
        settings: Runtime settings. Loaded from the environment
                  when not given.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Decision Scoring API",
        description="Weighted multi-criteria scoring of decision options.",
        version=settings.engine_version,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(analysis.router)

    @app.get("/")
    def root():
        return {"status": "ok", "message": "Decision Scoring API is running"}

    logger.info(
        f"Scoring API ready (personality={settings.default_personality.value}, "
        f"api_key={'on' if settings.api_key else 'off'})"
    )
    return app


if __name__ == "__main__":
    import uvicorn
    _settings = load_settings()
    setup_logging(_settings.log_level, _settings.log_format)
    uvicorn.run(create_app(_settings), host="0.0.0.0", port=8000)
