from typing import Optional

from fastapi import Header, HTTPException, Request

from decision_scoring.config import ScoringSettings


def get_settings(request: Request) -> ScoringSettings:
    return request.app.state.settings


def require_api_key(
    request: Request,
    x_api_key: Optional[str] = Header(default=None),
) -> None:
    """
    Reject the request unless it carries the configured x-api-key.

    No key configured means the API is open.
    """
    expected = get_settings(request).api_key
    if expected and x_api_key != expected:
        raise HTTPException(status_code=403, detail="Forbidden")
