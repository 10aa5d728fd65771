"""
Models Package - Capital Compass
compass/models/__init__.py

Immutable value objects produced by one batch run.
"""

from compass.models.analysis import (
    AnalysisResult,
    BatchDiagnostics,
    DashboardSummary,
    ScoreBin,
    ScoreDistribution,
)
from compass.models.company import (
    AcquisitionStatus,
    RawRecord,
    ScoredCompany,
    ScoreSet,
    ThemeFlags,
)
from compass.models.enumerations import IntelContext, ScoreCategory, StatusTag, Theme
from compass.models.investor import InvestorStat, PortfolioItem
from compass.models.trend import ThemeTrend

__all__ = [
    "AcquisitionStatus",
    "AnalysisResult",
    "BatchDiagnostics",
    "DashboardSummary",
    "IntelContext",
    "InvestorStat",
    "PortfolioItem",
    "RawRecord",
    "ScoreBin",
    "ScoreCategory",
    "ScoreDistribution",
    "ScoredCompany",
    "ScoreSet",
    "StatusTag",
    "Theme",
    "ThemeFlags",
    "ThemeTrend",
]
