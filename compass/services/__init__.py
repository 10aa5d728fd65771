"""
Services module for Capital Compass.
"""

from compass.services.analysis_service import AnalysisService
from compass.services.investor_service import aggregate_investors, extract_investors
from compass.services.narrative_service import NarrativeService
from compass.services.summary_service import build_summary, score_distribution, score_percentile
from compass.services.trend_service import aggregate_trends

__all__ = [
    "AnalysisService",
    "NarrativeService",
    "aggregate_investors",
    "aggregate_trends",
    "build_summary",
    "extract_investors",
    "score_distribution",
    "score_percentile",
]
