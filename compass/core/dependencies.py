"""
Dependencies - Capital Compass
compass/core/dependencies.py

FastAPI dependency injection for services.
"""

from functools import lru_cache

from compass.services.analysis_service import AnalysisService
from compass.services.narrative_service import NarrativeService


@lru_cache()
def get_analysis_service() -> AnalysisService:
    """Get cached AnalysisService instance."""
    return AnalysisService()


@lru_cache()
def get_narrative_service() -> NarrativeService:
    """Get cached NarrativeService instance."""
    return NarrativeService()
