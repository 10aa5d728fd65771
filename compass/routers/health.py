"""
Health Check Router - Capital Compass
compass/routers/health.py

Reports service status and whether the narrative collaborator is configured.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter
from pydantic import BaseModel

from compass.config import get_settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    settings = get_settings()
    narrative = "configured" if settings.ANTHROPIC_API_KEY else "not_configured"
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies={"narrative": narrative},
    )
