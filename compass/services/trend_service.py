"""
Trend Aggregator
compass/services/trend_service.py

Buckets companies by founding year and reports, per year, the percentage of
that year's companies carrying each theme.

Only years in (1990, current_year] are kept. Companies without a readable
founding date are skipped here and nowhere else.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Sequence

import structlog

from compass.models.company import ScoredCompany
from compass.models.enumerations import Theme
from compass.models.trend import ThemeTrend
from compass.pipelines.utils import parse_year
from compass.scoring.utils import round_half_up

logger = structlog.get_logger(__name__)

TREND_MIN_YEAR = 1990  # exclusive


def founding_year(company: ScoredCompany) -> Optional[int]:
    return parse_year(company.record.founded_date)


def aggregate_trends(
    companies: Sequence[ScoredCompany],
    current_year: Optional[int] = None,
) -> List[ThemeTrend]:
    """
    Args:
        companies: Scored and classified companies.
        current_year: Upper bound (inclusive); defaults to this year.

    Returns:
        One ThemeTrend per populated year, ascending.
    """
    upper = current_year or datetime.now().year
    totals: Dict[int, int] = {}
    hits: Dict[int, Dict[Theme, int]] = {}
    skipped = 0

    for company in companies:
        year = founding_year(company)
        if year is None or not (TREND_MIN_YEAR < year <= upper):
            skipped += 1
            continue
        totals[year] = totals.get(year, 0) + 1
        bucket = hits.setdefault(year, {theme: 0 for theme in Theme})
        for theme in company.themes.active():
            bucket[theme] += 1

    trends = []
    for year in sorted(totals):
        count = totals[year]
        pct = {
            theme: round_half_up(100 * hits[year][theme] / count, 1)
            for theme in Theme
        }
        trends.append(ThemeTrend(
            year=year,
            ai=pct[Theme.AI],
            climate=pct[Theme.CLIMATE],
            fintech=pct[Theme.FINTECH],
            healthcare=pct[Theme.HEALTHCARE],
            saas=pct[Theme.SAAS],
            consumer=pct[Theme.CONSUMER],
        ))

    logger.info("trends_aggregated", years=len(trends), skipped=skipped)
    return trends
