from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from decision_scoring import ScoringSettings
from scoring_api.dependencies import get_settings
from scoring_api.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(settings: ScoringSettings = Depends(get_settings)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.engine_version,
    )
